"""
Ball entity for Neon Pong.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.geometry.bounds import Position2D


@dataclass
class Ball:
    """
    Ball entity.

    Unlike the paddles, ``position`` is the centre of the ball.

    :ivar position (Position2D): Centre of the ball.
    :ivar radius (float): Radius of the ball.
    :ivar velocity (Velocity2D): Per-tick displacement (dx, dy).
    :ivar speed (float): Scalar speed, ``hypot(dx, dy)``.
    :ivar trail (Deque[tuple[float, float]]): Recent positions, oldest first.
    """

    position: Position2D
    radius: float
    velocity: Velocity2D
    speed: float = 5.0
    trail: Deque[tuple[float, float]] = field(
        default_factory=lambda: deque(maxlen=10)
    )

    def remember_position(self):
        """Push the current position on the trail, evicting the oldest."""
        self.trail.append((self.position.x, self.position.y))

    def launch(self, angle: float, direction: int):
        """
        Set velocity from ``speed`` and a launch angle.

        :param angle: Angle in radians, 0 is horizontal.
        :type angle: float

        :param direction: +1 to go right, -1 to go left.
        :type direction: int
        """
        self.velocity.vx = math.cos(angle) * self.speed * direction
        self.velocity.vy = math.sin(angle) * self.speed
