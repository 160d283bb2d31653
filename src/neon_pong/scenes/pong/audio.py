"""
Maps match events to sounds.
"""

from __future__ import annotations

from typing import Callable

from mini_arcade_core.utils import logger

from neon_pong.constants import ASSETS_ROOT
from neon_pong.engine import EventKind, MatchEvent
from neon_pong.engine.events import AI_WIN_FANFARE, PLAYER_WIN_FANFARE
from neon_pong.scenes.pong.models import PongWorld

EVENT_SOUNDS = {
    EventKind.WALL_BOUNCE: "wall_hit",
    EventKind.PLAYER_HIT: "paddle_hit",
    EventKind.AI_HIT: "paddle_hit",
    EventKind.PLAYER_SCORED: "player_scored",
    EventKind.AI_SCORED: "ai_scored",
}


def sound_files() -> dict[str, str]:
    """
    Sound name -> wav path for every event sound and fanfare cue.
    """
    sfx = ASSETS_ROOT / "sfx"
    names = set(EVENT_SOUNDS.values()) | {
        cue.sound for cue in PLAYER_WIN_FANFARE + AI_WIN_FANFARE
    }
    return {name: str(sfx / f"{name}.wav") for name in sorted(names)}


class PongSoundBoard:
    """
    Event listener that plays one sound per event and schedules the
    game-over fanfare on the world.
    """

    def __init__(self, audio, world: PongWorld, clock: Callable[[], float]):
        """
        :param audio: Audio service with a ``play(name)`` method.

        :param world: World whose cue queue receives the fanfare.
        :type world: PongWorld

        :param clock: Millisecond clock.
        :type clock: Callable[[], float]
        """
        self.audio = audio
        self.world = world
        self.clock = clock

    def __call__(self, event: MatchEvent):
        if event.cues:
            now = self.clock()
            self.world.pending_cues.extend(
                (now + cue.delay_ms, cue.sound) for cue in event.cues
            )

        sound = EVENT_SOUNDS.get(event.kind)
        if sound is not None:
            self.audio.play(sound)

    def flush(self):
        """Play every scheduled cue that is due."""
        if not self.world.pending_cues:
            return

        now = self.clock()
        due = [c for c in self.world.pending_cues if c[0] <= now]
        self.world.pending_cues = [
            c for c in self.world.pending_cues if c[0] > now
        ]
        for _, sound in sorted(due):
            try:
                self.audio.play(sound)
            # Justification: a broken audio device must not stop the game
            # pylint: disable=broad-exception-caught
            except Exception:
                logger.exception(f"Could not play cue {sound}")
            # pylint: enable=broad-exception-caught
