"""
Tunable settings for a Neon Pong match.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from neon_pong.constants import PADDLE_INSET, PADDLE_SIZE


@dataclass
class PaddleConfig:
    """
    Paddle settings.

    - speed: player paddle speed (units/tick)
    - ai_speed: AI paddle speed, kept below the player's
    - inset: distance between a side wall and its paddle
    """

    width: float = float(PADDLE_SIZE[0])
    height: float = float(PADDLE_SIZE[1])
    speed: float = 8.0
    ai_speed: float = 4.0  # slower than the player
    inset: float = float(PADDLE_INSET)


@dataclass
class AiConfig:
    """
    AI opponent settings.

    - reaction_delay_ms: minimum time between two looks at the ball
    - error_margin: width of the aim error window (pixels)
    - dead_zone: how close to the target before the paddle stops moving
    """

    reaction_delay_ms: float = 150.0
    error_margin: float = 35.0
    dead_zone: float = 40.0


@dataclass
class BallConfig:
    """Ball settings."""

    radius: float = 12.0
    initial_speed: float = 5.0
    max_speed: float = 12.0
    speed_increase: float = 0.3
    trail_length: int = 10
    # serve angle is drawn from [-max_serve_angle, +max_serve_angle] degrees
    max_serve_angle: float = 30.0


@dataclass
class MatchConfig:
    """
    Match rules.

    - auto_start_on_restart: restart goes straight back to playing instead
      of waiting in the start state for an explicit ``start()``
    """

    win_score: int = 5
    wall_burst: int = 5
    paddle_burst: int = 10
    auto_start_on_restart: bool = False


@dataclass
class PongConfig:
    """
    Full configuration of a match.

    :ivar paddle (PaddleConfig): Paddle settings.
    :ivar ai (AiConfig): AI opponent settings.
    :ivar ball (BallConfig): Ball settings.
    :ivar match (MatchConfig): Match rules.
    """

    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ai: AiConfig = field(default_factory=AiConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    match: MatchConfig = field(default_factory=MatchConfig)
