"""
Match state machine and the per-tick simulation driver.
"""

from __future__ import annotations

import random
import time
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D
from mini_arcade_core.utils import logger

from neon_pong.config import PongConfig
from neon_pong.constants import WINDOW_SIZE
from neon_pong.controllers.cpu import CpuPaddleController
from neon_pong.controllers.player import IDLE, PaddleIntent, update_player
from neon_pong.engine.events import (
    EventDispatcher,
    EventKind,
    MatchEvent,
    Side,
)
from neon_pong.engine.particles import ParticleSystem
from neon_pong.engine.physics import advance_ball, reset_ball
from neon_pong.engine.snapshot import (
    BallView,
    MatchSnapshot,
    PaddleView,
    ParticleView,
)
from neon_pong.entities import Ball, Paddle
from neon_pong.geometry import rescale


class MatchState(str, Enum):
    """Match lifecycle states."""

    START = "start"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class ScoreState:
    """
    Score state for a match.

    :ivar player (int): Points of the human player.
    :ivar ai (int): Points of the CPU.
    """

    player: int = 0
    ai: int = 0

    def reset(self):
        """Back to 0 - 0."""
        self.player = 0
        self.ai = 0


def monotonic_ms() -> float:
    """Default clock, in milliseconds."""
    return time.monotonic() * 1000.0


# Justification: the context owns every piece of match state
# pylint: disable=too-many-instance-attributes
@dataclass
class MatchContext:
    """
    Everything a match owns.

    :ivar config (PongConfig): Match configuration.
    :ivar viewport (tuple[float, float]): Court size (width, height).
    :ivar player (Paddle): Left, human paddle.
    :ivar ai (Paddle): Right, CPU paddle.
    :ivar ball (Ball): The ball.
    :ivar particles (ParticleSystem): Live sparks.
    :ivar cpu (CpuPaddleController): Controller of the AI paddle.
    :ivar score (ScoreState): Current score.
    :ivar state (MatchState): Current lifecycle state.
    :ivar winner (Side | None): Winner once the match is over.
    :ivar rng (random.Random): Random source for serves and sparks.
    :ivar clock (Callable[[], float]): Millisecond clock used by the CPU.
    """

    config: PongConfig
    viewport: tuple[float, float]
    player: Paddle
    ai: Paddle
    ball: Ball
    particles: ParticleSystem
    cpu: CpuPaddleController
    rng: random.Random
    clock: Callable[[], float]
    score: ScoreState = field(default_factory=ScoreState)
    state: MatchState = MatchState.START
    winner: Optional[Side] = None

    @classmethod
    def create(
        cls,
        config: PongConfig | None = None,
        viewport: tuple[float, float] = WINDOW_SIZE,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], float] = monotonic_ms,
    ) -> "MatchContext":
        """
        Build a fresh match with both paddles centred and the ball in the
        middle of the court.
        """
        config = config or PongConfig()
        rng = rng or random.Random()
        vw, vh = float(viewport[0]), float(viewport[1])
        pad = config.paddle

        player = Paddle(
            position=Position2D(pad.inset, vh / 2 - pad.height / 2),
            size=Size2D(pad.width, pad.height),
            velocity=Velocity2D(0.0, 0.0),
            speed=pad.speed,
        )
        ai = Paddle(
            position=Position2D(
                vw - pad.inset - pad.width, vh / 2 - pad.height / 2
            ),
            size=Size2D(pad.width, pad.height),
            velocity=Velocity2D(0.0, 0.0),
            speed=pad.ai_speed,
        )
        ball = Ball(
            position=Position2D(vw / 2, vh / 2),
            radius=config.ball.radius,
            velocity=Velocity2D(config.ball.initial_speed, 0.0),
            speed=config.ball.initial_speed,
            trail=deque(maxlen=config.ball.trail_length),
        )

        return cls(
            config=config,
            viewport=(vw, vh),
            player=player,
            ai=ai,
            ball=ball,
            particles=ParticleSystem(rng),
            cpu=CpuPaddleController(ai, ball, config=config.ai, rng=rng),
            rng=rng,
            clock=clock,
        )


# pylint: enable=too-many-instance-attributes


class Match:
    """
    Drives a match: lifecycle transitions plus the ``tick()`` entry point
    the host calls once per frame.

    Transitions that do not apply to the current state are no-ops and
    return False.
    """

    def __init__(self, context: MatchContext | None = None):
        """
        :param context: Match state to drive; a default one is built if omitted.
        :type context: MatchContext, optional
        """
        self.context = context or MatchContext.create()
        self.events = EventDispatcher()

    @property
    def state(self) -> MatchState:
        """Current lifecycle state."""
        return self.context.state

    def _ignored(self, action: str) -> bool:
        logger.debug(f"Ignoring {action} while {self.context.state.value}")
        return False

    def start(self) -> bool:
        """Start -> Playing, serving a fresh ball."""
        ctx = self.context
        if ctx.state is not MatchState.START:
            return self._ignored("start")

        reset_ball(ctx.ball, ctx.viewport, ctx.config.ball, ctx.rng)
        ctx.cpu.reset(ctx.viewport[1])
        ctx.state = MatchState.PLAYING
        logger.info("Match started")
        return True

    def pause(self) -> bool:
        """Playing -> Paused. Entities are left exactly as they are."""
        if self.context.state is not MatchState.PLAYING:
            return self._ignored("pause")

        self.context.state = MatchState.PAUSED
        logger.info("Match paused")
        return True

    def resume(self) -> bool:
        """Paused -> Playing."""
        if self.context.state is not MatchState.PAUSED:
            return self._ignored("resume")

        self.context.state = MatchState.PLAYING
        logger.info("Match resumed")
        return True

    def restart(self) -> bool:
        """
        Any state -> Start (or straight to Playing when
        ``auto_start_on_restart`` is set).

        Clears scores, particles and trail and recentres both paddles.
        """
        ctx = self.context
        ctx.score.reset()
        ctx.winner = None
        ctx.player.center_on(ctx.viewport[1])
        ctx.ai.center_on(ctx.viewport[1])
        ctx.particles.clear()
        ctx.ball.trail.clear()
        ctx.cpu.reset(ctx.viewport[1])
        ctx.state = MatchState.START
        logger.info("Match restarted")

        if ctx.config.match.auto_start_on_restart:
            self.start()
        return True

    def resize(self, width: float, height: float):
        """
        Adapt to a new court size.

        Ball and paddles are moved proportionally, the AI paddle keeps its
        inset from the right wall, then everything is clamped.
        """
        if width <= 0 or height <= 0:
            logger.warning(f"Ignoring invalid viewport {width}x{height}")
            return

        ctx = self.context
        old_w, old_h = ctx.viewport
        ctx.viewport = (float(width), float(height))
        inset = ctx.config.paddle.inset

        for paddle in (ctx.player, ctx.ai):
            paddle.position.y = rescale(paddle.position.y, old_h, height)
            paddle.clamp_to(height)
        ctx.ai.position.x = width - inset - ctx.ai.size.width

        ball = ctx.ball
        ball.position.x = rescale(ball.position.x, old_w, width)
        ball.position.y = rescale(ball.position.y, old_h, height)
        scaled = [
            (rescale(x, old_w, width), rescale(y, old_h, height))
            for x, y in ball.trail
        ]
        ball.trail.clear()
        ball.trail.extend(scaled)

        logger.info(f"Viewport resized to {width}x{height}")

    def _award_point(self, side: Side) -> Optional[MatchEvent]:
        ctx = self.context
        if side == "player":
            ctx.score.player += 1
            points = ctx.score.player
        else:
            ctx.score.ai += 1
            points = ctx.score.ai
        logger.debug(
            f"Point for {side}: {ctx.score.player} - {ctx.score.ai}"
        )

        if points >= ctx.config.match.win_score:
            ctx.state = MatchState.GAME_OVER
            ctx.winner = side
            logger.info(
                f"Game over, {side} wins "
                f"{ctx.score.player} - {ctx.score.ai}"
            )
            return MatchEvent.game_over(side)

        reset_ball(ctx.ball, ctx.viewport, ctx.config.ball, ctx.rng)
        return None

    def tick(self, intent: PaddleIntent = IDLE) -> list[MatchEvent]:
        """
        Run one simulation step if the match is playing.

        Player paddle, then CPU, then ball, then particles. Events are
        dispatched to subscribers and returned.

        :param intent: Player input for this tick.
        :type intent: PaddleIntent

        :return: Events produced by this tick.
        :rtype: list[MatchEvent]
        """
        ctx = self.context
        if ctx.state is not MatchState.PLAYING:
            return []

        _, vh = ctx.viewport
        update_player(ctx.player, intent, vh)
        ctx.cpu.update(ctx.clock(), vh)

        events = advance_ball(
            ctx.ball, ctx.player, ctx.ai, ctx.viewport, ctx.config.ball
        )

        extra: list[MatchEvent] = []
        for event in events:
            if event.kind is EventKind.WALL_BOUNCE:
                ctx.particles.spawn(
                    event.x, event.y, ctx.config.match.wall_burst
                )
            elif event.kind in (EventKind.PLAYER_HIT, EventKind.AI_HIT):
                ctx.particles.spawn(
                    event.x, event.y, ctx.config.match.paddle_burst
                )
            elif event.kind is EventKind.PLAYER_SCORED:
                game_over = self._award_point("player")
                if game_over is not None:
                    extra.append(game_over)
            elif event.kind is EventKind.AI_SCORED:
                game_over = self._award_point("ai")
                if game_over is not None:
                    extra.append(game_over)
        events.extend(extra)

        ctx.particles.update()

        self.events.dispatch(events)
        return events

    def snapshot(self) -> MatchSnapshot:
        """Freeze the current match into a read-only view."""
        ctx = self.context

        def paddle_view(paddle: Paddle) -> PaddleView:
            return PaddleView(*paddle.rect)

        return MatchSnapshot(
            state=ctx.state.value,
            viewport=ctx.viewport,
            player=paddle_view(ctx.player),
            ai=paddle_view(ctx.ai),
            ball=BallView(
                x=ctx.ball.position.x,
                y=ctx.ball.position.y,
                radius=ctx.ball.radius,
                trail=tuple(ctx.ball.trail),
            ),
            particles=tuple(
                ParticleView(p.x, p.y, p.radius, p.opacity)
                for p in ctx.particles
            ),
            player_score=ctx.score.player,
            ai_score=ctx.score.ai,
            winner=ctx.winner,
        )
