"""
Simulation engine for Neon Pong: physics, CPU, particles and the match
state machine. Nothing in here draws or plays sounds.
"""

from __future__ import annotations

from .events import Cue, EventDispatcher, EventKind, MatchEvent
from .match import Match, MatchContext, MatchState, ScoreState
from .particles import ParticleSystem
from .snapshot import MatchSnapshot

__all__ = [
    "Cue",
    "EventDispatcher",
    "EventKind",
    "Match",
    "MatchContext",
    "MatchEvent",
    "MatchSnapshot",
    "MatchState",
    "ParticleSystem",
    "ScoreState",
]
