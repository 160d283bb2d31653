"""
Pong scene: feeds input to the match engine, renders its snapshot and
turns its events into sounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.backend import Backend
from mini_arcade_core.backend.keys import Key
from mini_arcade_core.runtime.services import RuntimeServices
from mini_arcade_core.scenes.autoreg import (  # pyright: ignore[reportMissingImports]
    register_scene,
)
from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    Drawable,
    DrawCall,
    SimScene,
)
from mini_arcade_core.scenes.systems.builtins import (
    BaseRenderSystem,
    InputIntentSystem,
)

from neon_pong.config import PongConfig
from neon_pong.constants import (
    BALL_COLOR,
    CENTER_LINE_COLOR,
    PADDLE_COLOR,
    PARTICLE_COLOR,
    WHITE,
)
from neon_pong.controllers.player import IDLE
from neon_pong.engine import EventKind, Match, MatchContext, MatchState
from neon_pong.engine.match import monotonic_ms
from neon_pong.scenes.commands import (
    GameOverCommand,
    PauseGameCommand,
    RestartCommand,
)
from neon_pong.scenes.pong.audio import PongSoundBoard
from neon_pong.scenes.pong.models import PongIntent, PongTickContext, PongWorld


@dataclass
class PongInputSystem(InputIntentSystem):
    """
    Process input and update intent.
    """

    name: str = "pong_input"

    def build_intent(self, ctx: PongTickContext):
        """Process input and update intent."""
        down = ctx.input_frame.keys_down
        pressed = ctx.input_frame.keys_pressed

        return PongIntent(
            move_up=Key.W in down or Key.UP in down,
            move_down=Key.S in down or Key.DOWN in down,
            pause=Key.ESCAPE in pressed,
            restart=Key.R in pressed,
        )


@dataclass
class PongViewportSystem:
    """Keeps the match court in sync with the window's virtual size."""

    services: RuntimeServices
    name: str = "pong_viewport"
    order: int = 11

    def step(self, ctx: PongTickContext):
        """Resize the match when the virtual size changed."""
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return
        if (float(vw), float(vh)) != ctx.world.match.context.viewport:
            ctx.world.match.resize(vw, vh)


@dataclass
class PongLifecycleSystem:
    """Turns pause/restart intents into commands."""

    name: str = "pong_lifecycle"
    order: int = 12  # right after input

    def step(self, ctx: PongTickContext):
        """Push pause/restart commands."""
        if ctx.intent is None:
            return

        if ctx.intent.restart:
            ctx.commands.push(RestartCommand())
            return

        # avoid re-triggering while the overlay is up
        if ctx.intent.pause and ctx.world.match.state is MatchState.PLAYING:
            ctx.commands.push(PauseGameCommand())


@dataclass
class MatchTickSystem:
    """
    Runs one engine tick per frame. The engine itself ignores ticks while
    the match is not playing.
    """

    name: str = "pong_match_tick"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Advance the match and take a snapshot for rendering."""
        intent = ctx.intent.to_paddle_intent() if ctx.intent else IDLE
        events = ctx.world.match.tick(intent)

        if any(e.kind is EventKind.GAME_OVER for e in events):
            ctx.commands.push(GameOverCommand())

        ctx.world.snapshot = ctx.world.match.snapshot()


@dataclass
class PongCueSystem:
    """Plays scheduled fanfare cues when they are due."""

    sound_board: PongSoundBoard
    name: str = "pong_cues"
    order: int = 90

    def step(self, _ctx: PongTickContext):
        """Flush due cues."""
        self.sound_board.flush()


class DrawCenterLine(Drawable[PongTickContext]):
    """
    Drawable to render the center dashed line.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        vw, vh = ctx.world.snapshot.viewport

        x = int(vw / 2) - 1
        dash_h = 15
        gap = 15

        y = 0
        while y < vh:
            backend.render.draw_rect(
                x, int(y), 3, dash_h, color=CENTER_LINE_COLOR
            )
            y += dash_h + gap


class DrawPaddles(Drawable[PongTickContext]):
    """
    Drawable to render both paddles.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        for paddle in (ctx.world.snapshot.player, ctx.world.snapshot.ai):
            backend.render.draw_rect(
                int(paddle.x),
                int(paddle.y),
                int(paddle.width),
                int(paddle.height),
                color=PADDLE_COLOR,
            )


class DrawTrail(Drawable[PongTickContext]):
    """
    Drawable to render the ball trail.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.snapshot.ball
        count = len(ball.trail)
        if count == 0:
            return

        size = ball.radius * 0.8
        for i, (x, y) in enumerate(ball.trail):
            alpha = (i / count) * 0.5  # max 50%
            backend.render.draw_rect(
                int(x - size),
                int(y - size),
                int(size * 2),
                int(size * 2),
                color=(*BALL_COLOR, alpha),
            )


class DrawBall(Drawable[PongTickContext]):
    """
    Drawable to render the ball.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        ball = ctx.world.snapshot.ball
        backend.render.draw_rect(
            int(ball.x - ball.radius),
            int(ball.y - ball.radius),
            int(ball.radius * 2),
            int(ball.radius * 2),
            color=BALL_COLOR,
        )


class DrawParticles(Drawable[PongTickContext]):
    """
    Drawable to render collision sparks.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        for p in ctx.world.snapshot.particles:
            side = max(1, int(p.radius * 2))
            backend.render.draw_rect(
                int(p.x - p.radius),
                int(p.y - p.radius),
                side,
                side,
                color=(*PARTICLE_COLOR, p.opacity),
            )


class DrawScore(Drawable[PongTickContext]):
    """
    Drawable to render the score.
    """

    def draw(self, backend: Backend, ctx: PongTickContext):
        snapshot = ctx.world.snapshot
        vw, _ = snapshot.viewport

        left_text = str(snapshot.player_score)
        right_text = str(snapshot.ai_score)

        # measure pixel width of each score
        left_w, _ = backend.text.measure(left_text)

        center_x = vw // 2
        gap = 40  # distance from center line to each score

        backend.text.draw(
            (center_x - gap) - left_w, 20, left_text, color=WHITE
        )
        backend.text.draw(center_x + gap, 20, right_text, color=WHITE)


@dataclass
class PongRenderSystem(BaseRenderSystem):
    """
    Render the Pong world.
    """

    name: str = "pong_render"
    order: int = 100

    def step(self, ctx: PongTickContext):
        """Render the Pong world."""
        if ctx.world.snapshot is None:
            ctx.world.snapshot = ctx.world.match.snapshot()

        ctx.draw_ops = [
            DrawCall(drawable=DrawCenterLine(), ctx=ctx),
            DrawCall(drawable=DrawPaddles(), ctx=ctx),
            DrawCall(drawable=DrawTrail(), ctx=ctx),
            DrawCall(drawable=DrawBall(), ctx=ctx),
            DrawCall(drawable=DrawParticles(), ctx=ctx),
            DrawCall(drawable=DrawScore(), ctx=ctx),
        ]
        super().step(ctx)


@register_scene("pong")
class PongScene(SimScene[PongTickContext, PongWorld]):
    """
    Player (left) against the CPU (right).
    """

    tick_context_type = PongTickContext

    def on_enter(self):
        # Justification: window typer is protocol, mypy can't infer correctly
        # pylint: disable=assignment-from-no-return
        vw, vh = self.context.services.window.get_virtual_size()
        # pylint: enable=assignment-from-no-return

        match = Match(MatchContext.create(PongConfig(), viewport=(vw, vh)))
        self.world = PongWorld(match=match)

        sound_board = PongSoundBoard(
            self.context.services.audio, self.world, monotonic_ms
        )
        match.events.subscribe(sound_board)

        # entering from the menu's START is the explicit start signal
        match.start()

        self.systems.extend(
            [
                PongInputSystem(),
                PongViewportSystem(self.context.services),
                PongLifecycleSystem(),
                MatchTickSystem(),
                PongCueSystem(sound_board),
                PongRenderSystem(),
            ]
        )
