"""
Entities package for Neon Pong.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .paddle import Paddle
from .particle import Particle, is_expired, update_particle

__all__ = [
    "Ball",
    "Paddle",
    "Particle",
    "is_expired",
    "update_particle",
]
