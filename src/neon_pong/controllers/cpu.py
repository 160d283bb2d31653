"""
CPU paddle controller for Neon Pong.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from neon_pong.config import AiConfig
from neon_pong.entities import Ball, Paddle


@dataclass
class AiState:
    """
    What the CPU remembers between ticks.

    :ivar last_reaction_ms (float | None): When the ball was last sampled.
    :ivar target_y (float): Where the paddle centre is heading.
    :ivar prediction_offset (float): Aim error used on the last sample.
    """

    target_y: float
    last_reaction_ms: Optional[float] = None
    prediction_offset: float = 0.0


class CpuPaddleController:
    """
    Reactive CPU:
    - Looks at the ball only while it comes towards the CPU side, and only
      once every ``reaction_delay_ms``.
    - Aims at the ball's Y plus a random error.
    - Drifts back to the middle while the ball goes away.
    - Holds still inside the dead zone.
    """

    def __init__(
        self,
        paddle: Paddle,
        ball: Ball,
        *,
        config: AiConfig | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param paddle: The paddle to control.
        :type paddle: Paddle

        :param ball: The ball to track.
        :type ball: Ball

        :param config: The CPU configuration settings.
        :type config: AiConfig, optional

        :param rng: Random source for the aim error.
        :type rng: random.Random, optional
        """
        self.paddle = paddle
        self.ball = ball
        self.config = config or AiConfig()
        self.rng = rng or random.Random()
        self.state = AiState(target_y=paddle.center_y)

    def reset(self, viewport_height: float):
        """Forget the last sample and aim at the middle again."""
        self.state = AiState(target_y=viewport_height / 2)

    def _new_offset(self) -> float:
        # vertical error in [-error_margin / 2, error_margin / 2]
        half = self.config.error_margin / 2
        return self.rng.uniform(-half, half) if half > 0 else 0.0

    def update_target(self, now_ms: float, viewport_height: float):
        """Re-sample the ball if the CPU is allowed to react yet."""
        if self.ball.velocity.vx <= 0:
            self.state.target_y = viewport_height / 2
            return

        last = self.state.last_reaction_ms
        if last is not None and now_ms - last < self.config.reaction_delay_ms:
            return

        self.state.last_reaction_ms = now_ms
        self.state.prediction_offset = self._new_offset()
        self.state.target_y = self.ball.position.y + self.state.prediction_offset

    def compute_move(self) -> float:
        """
        Decide paddle move direction:
            -1.0 = up
            0.0 = stop
            +1.0 = down
        """
        diff = self.state.target_y - self.paddle.center_y

        # Dead zone = no jitter when already close
        if abs(diff) <= self.config.dead_zone:
            return 0.0

        return 1.0 if diff > 0 else -1.0

    def update(self, now_ms: float, viewport_height: float):
        """
        Run the CPU for one tick.

        :param now_ms: Current clock reading in milliseconds.
        :type now_ms: float

        :param viewport_height: Court height.
        :type viewport_height: float
        """
        self.update_target(now_ms, viewport_height)

        self.paddle.velocity.vy = self.compute_move() * self.paddle.speed
        self.paddle.position.y += self.paddle.velocity.vy
        self.paddle.clamp_to(viewport_height)
