"""
Paddle entity for Neon Pong.
"""

from __future__ import annotations

from dataclasses import dataclass

from mini_arcade_core.spaces.d2.physics2d import Velocity2D
from mini_arcade_core.spaces.geometry.bounds import Position2D, Size2D

from neon_pong.geometry import clamp


@dataclass
class Paddle:
    """
    Paddle entity.

    ``position`` is the top-left corner; X never changes during a rally.

    :ivar position (Position2D): Position of the paddle.
    :ivar size (Size2D): Size of the paddle.
    :ivar velocity (Velocity2D): Velocity of the paddle (only vy is used).
    :ivar speed (float): Movement speed of the paddle (units/tick).
    """

    position: Position2D
    size: Size2D
    velocity: Velocity2D
    speed: float = 8.0

    @property
    def center_y(self) -> float:
        """Vertical centre of the paddle."""
        return self.position.y + self.size.height / 2

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Paddle as an (x, y, width, height) rectangle."""
        return (
            self.position.x,
            self.position.y,
            self.size.width,
            self.size.height,
        )

    def clamp_to(self, viewport_height: float):
        """Keep the paddle fully inside ``[0, viewport_height]``."""
        self.position.y = clamp(
            self.position.y, 0.0, viewport_height - self.size.height
        )

    def center_on(self, viewport_height: float):
        """Put the paddle back in the vertical middle of the court."""
        self.position.y = viewport_height / 2 - self.size.height / 2
        self.velocity.stop()
