"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mini_arcade_core.scenes.sim_scene import (  # pyright: ignore[reportMissingImports]
    BaseIntent,
    BaseTickContext,
    BaseWorld,
)

from neon_pong.controllers.player import PaddleIntent
from neon_pong.engine import Match, MatchSnapshot


@dataclass
class PongWorld(BaseWorld):
    """
    Pong world state.

    :ivar match (Match): The simulated match.
    :ivar snapshot (MatchSnapshot | None): Last frame handed to the renderer.
    :ivar pending_cues (list[tuple[float, str]]): Scheduled (due_ms, sound) pairs.
    """

    entities: list = field(default_factory=list)
    match: Match = field(default_factory=Match)
    snapshot: Optional[MatchSnapshot] = None
    pending_cues: list[tuple[float, str]] = field(default_factory=list)


@dataclass(frozen=True)
class PongIntent(BaseIntent):
    """
    Player intent for the Pong scene.

    :ivar move_up (bool): Player paddle up.
    :ivar move_down (bool): Player paddle down.
    :ivar pause (bool): Whether to pause the game.
    :ivar restart (bool): Whether to restart the match.
    """

    move_up: bool = False
    move_down: bool = False
    pause: bool = False
    restart: bool = False

    def to_paddle_intent(self) -> PaddleIntent:
        """Directional intent consumed by the engine."""
        return PaddleIntent(move_up=self.move_up, move_down=self.move_down)


@dataclass
class PongTickContext(BaseTickContext[PongWorld, PongIntent]):
    """
    Context for a Pong scene tick.

    :ivar input_frame (InputFrame): Current input frame.
    :ivar dt (float): Delta time since last tick.

    :ivar world (PongWorld): Current Pong world state.
    :ivar commands (CommandQueue): Command queue.

    :ivar intent (Optional[PongIntent]): Player intent for this tick.
    :ivar packet (Optional[RenderPacket]): Render packet for this tick.
    """


def find_pong_world(scenes) -> Optional[PongWorld]:
    """
    Topmost Pong world on the scene stack.

    Overlays such as the pause menu own a menu world of their own, so the
    command context's world is not the match once one is pushed.

    :param scenes: Anything with a ``visible_entries()`` method (scene
        manager or scene query service).

    :return: The Pong world, or None when no Pong scene is on the stack.
    :rtype: PongWorld | None
    """
    for entry in reversed(list(scenes.visible_entries())):
        world = getattr(entry.scene, "world", None)
        if isinstance(world, PongWorld):
            return world
    return None
