"""
Read-only views of a match, handed to renderers once per tick.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from neon_pong.engine.events import Side


@dataclass(frozen=True)
class PaddleView:
    """Paddle rectangle."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class BallView:
    """Ball centre, radius and trail (oldest first)."""

    x: float
    y: float
    radius: float
    trail: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class ParticleView:
    """Particle position, radius and opacity."""

    x: float
    y: float
    radius: float
    opacity: float


@dataclass(frozen=True)
class MatchSnapshot:
    """
    Everything a renderer needs for one frame.

    :ivar state (str): Current match state value.
    :ivar viewport (tuple[float, float]): Court size.
    :ivar player_score (int): Player points.
    :ivar ai_score (int): AI points.
    :ivar winner (Side | None): Set once the match is over.
    """

    state: str
    viewport: tuple[float, float]
    player: PaddleView
    ai: PaddleView
    ball: BallView
    particles: tuple[ParticleView, ...]
    player_score: int
    ai_score: int
    winner: Optional[Side] = None
