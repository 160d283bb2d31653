"""
Events emitted by a match for audio/visual collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Literal, Optional

from mini_arcade_core.utils import logger

Side = Literal["player", "ai"]


class EventKind(str, Enum):
    """Kinds of discrete match events."""

    WALL_BOUNCE = "wall_bounce"
    PLAYER_HIT = "player_hit"
    AI_HIT = "ai_hit"
    PLAYER_SCORED = "player_scored"
    AI_SCORED = "ai_scored"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Cue:
    """
    One step of a timed sound sequence.

    :ivar delay_ms (int): Offset from the event, in milliseconds.
    :ivar note (str): Note name, e.g. ``C5``.
    :ivar duration (float): Length of the note in seconds.
    """

    delay_ms: int
    note: str
    duration: float

    @property
    def sound(self) -> str:
        """Sound id of this note held for its duration, e.g. ``c5_200``."""
        return f"{self.note.lower()}_{round(self.duration * 1000)}"


PLAYER_WIN_FANFARE = (
    Cue(0, "C5", 0.2),
    Cue(100, "E5", 0.2),
    Cue(200, "G5", 0.3),
)
AI_WIN_FANFARE = (
    Cue(0, "G4", 0.2),
    Cue(100, "E4", 0.2),
    Cue(200, "C4", 0.3),
)


@dataclass(frozen=True)
class MatchEvent:
    """
    Something that happened during a tick.

    :ivar kind (EventKind): What happened.
    :ivar x (float): Where it happened (ball X).
    :ivar y (float): Where it happened (ball Y).
    :ivar winner (Side | None): Winning side, for ``GAME_OVER`` only.
    :ivar cues (tuple[Cue, ...]): Timed sound sequence, for ``GAME_OVER`` only.
    """

    kind: EventKind
    x: float = 0.0
    y: float = 0.0
    winner: Optional[Side] = None
    cues: tuple[Cue, ...] = ()

    @classmethod
    def game_over(cls, winner: Side) -> "MatchEvent":
        """Build the game-over event with its fanfare."""
        cues = PLAYER_WIN_FANFARE if winner == "player" else AI_WIN_FANFARE
        return cls(EventKind.GAME_OVER, winner=winner, cues=cues)


Listener = Callable[[MatchEvent], None]


class EventDispatcher:
    """
    Fans match events out to collaborators.

    A failing listener is logged and skipped; it never reaches the tick.
    """

    def __init__(self):
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener):
        """Register a listener called once per event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        """Remove a listener, if registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, events: Iterable[MatchEvent]):
        """Deliver ``events`` in order to every listener."""
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                # Justification: collaborator failures must not halt the tick
                # pylint: disable=broad-exception-caught
                except Exception:
                    logger.exception(
                        f"Listener {listener!r} failed on {event.kind.value}"
                    )
                # pylint: enable=broad-exception-caught
