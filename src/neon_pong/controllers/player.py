"""
Player paddle controller for Neon Pong.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from neon_pong.entities import Paddle


@dataclass(frozen=True)
class PaddleIntent:
    """
    Directional intent for the player paddle, already decoded from keys or
    touch by the input collaborator.

    :ivar move_up (bool): Move the paddle up.
    :ivar move_down (bool): Move the paddle down.
    :ivar touch_y (float | None): Absolute Y for the paddle centre (touch drag).
    """

    move_up: bool = False
    move_down: bool = False
    touch_y: Optional[float] = None


IDLE = PaddleIntent()


def update_player(paddle: Paddle, intent: PaddleIntent, viewport_height: float):
    """
    Move the player paddle for one tick and clamp it to the court.

    Up wins when both directions are held. A touch position overrides
    the keys for this tick.
    """
    if intent.touch_y is not None:
        paddle.velocity.vy = 0.0
        paddle.position.y = intent.touch_y - paddle.size.height / 2
    else:
        if intent.move_up:
            paddle.velocity.vy = -paddle.speed
        elif intent.move_down:
            paddle.velocity.vy = paddle.speed
        else:
            paddle.velocity.vy = 0.0
        paddle.position.y += paddle.velocity.vy

    paddle.clamp_to(viewport_height)
