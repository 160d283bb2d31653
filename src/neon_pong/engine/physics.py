"""
Ball physics: motion, wall and paddle collisions, goal detection.
"""

from __future__ import annotations

import math
import random

from neon_pong.config import BallConfig
from neon_pong.engine.events import EventKind, MatchEvent
from neon_pong.entities import Ball, Paddle
from neon_pong.geometry import circle_overlaps_rect

# Largest deflection off a paddle edge.
MAX_BOUNCE_ANGLE = math.pi / 4


def bounce_off_paddle(
    ball: Ball, paddle: Paddle, direction: int, config: BallConfig
):
    """
    Send the ball back from ``paddle``.

    The further from the paddle centre the ball lands, the steeper it
    leaves; every hit speeds it up until ``max_speed``.

    :param ball: The ball to deflect.
    :type ball: Ball

    :param paddle: The paddle that was hit.
    :type paddle: Paddle

    :param direction: +1 when the ball must leave to the right, -1 to the left.
    :type direction: int

    :param config: Ball settings.
    :type config: BallConfig
    """
    half = paddle.size.height / 2
    hit_pos = (ball.position.y - paddle.center_y) / half if half > 0 else 0.0
    angle = hit_pos * MAX_BOUNCE_ANGLE

    ball.speed = min(ball.speed + config.speed_increase, config.max_speed)
    ball.velocity.vx = direction * math.cos(angle) * ball.speed
    ball.velocity.vy = math.sin(angle) * ball.speed

    # flush against the face so the next tick does not hit again
    if direction > 0:
        ball.position.x = paddle.position.x + paddle.size.width + ball.radius
    else:
        ball.position.x = paddle.position.x - ball.radius


def advance_ball(
    ball: Ball,
    player: Paddle,
    ai: Paddle,
    viewport: tuple[float, float],
    config: BallConfig,
) -> list[MatchEvent]:
    """
    Move the ball one tick and resolve what it touched.

    Order is walls, player paddle, AI paddle, goals. A wall bounce and a
    paddle hit may both happen in the same tick; a goal never comes with
    a hit since the ball must be past the paddle plane.

    Walls only flip ``vy``; the ball is not pushed back inside the court.

    :return: Events in the order they happened (empty most ticks).
    :rtype: list[MatchEvent]
    """
    width, height = viewport
    events: list[MatchEvent] = []

    ball.remember_position()
    x, y = ball.velocity.advance(ball.position.x, ball.position.y, 1.0)
    ball.position.x, ball.position.y = x, y

    r = ball.radius
    if ball.position.y - r < 0 or ball.position.y + r > height:
        ball.velocity.vy = -ball.velocity.vy
        events.append(
            MatchEvent(EventKind.WALL_BOUNCE, ball.position.x, ball.position.y)
        )

    if circle_overlaps_rect(ball.position.x, ball.position.y, r, player.rect):
        bounce_off_paddle(ball, player, +1, config)
        events.append(
            MatchEvent(EventKind.PLAYER_HIT, ball.position.x, ball.position.y)
        )

    if circle_overlaps_rect(ball.position.x, ball.position.y, r, ai.rect):
        bounce_off_paddle(ball, ai, -1, config)
        events.append(
            MatchEvent(EventKind.AI_HIT, ball.position.x, ball.position.y)
        )

    if ball.position.x - r < 0:
        events.append(
            MatchEvent(EventKind.AI_SCORED, ball.position.x, ball.position.y)
        )
    elif ball.position.x + r > width:
        events.append(
            MatchEvent(
                EventKind.PLAYER_SCORED, ball.position.x, ball.position.y
            )
        )

    return events


def reset_ball(
    ball: Ball,
    viewport: tuple[float, float],
    config: BallConfig,
    rng: random.Random,
):
    """
    Serve a fresh ball from the centre of the court.

    Speed goes back to ``initial_speed``, the angle is uniform in
    ``[-max_serve_angle, +max_serve_angle]`` and the side is a coin flip.
    """
    width, height = viewport
    ball.position.x = width / 2
    ball.position.y = height / 2
    ball.speed = config.initial_speed

    limit = math.radians(config.max_serve_angle)
    angle = rng.uniform(-limit, limit)
    direction = 1 if rng.random() < 0.5 else -1
    ball.launch(angle, direction)

    ball.trail.clear()
