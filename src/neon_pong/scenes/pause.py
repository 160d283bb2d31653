"""
Pause overlay for Neon Pong.

Shows the score at the moment of pausing. ESC resumes instead of quitting.
"""

from __future__ import annotations

from typing import Optional

from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from neon_pong.constants import (
    BACKGROUND,
    BUTTON_BORDER,
    BUTTON_FILL,
    DIM,
    HIGHLIGHT,
    WHITE,
)
from neon_pong.scenes.commands import BackToMenuCommand, ContinueCommand
from neon_pong.scenes.pong.models import PongWorld, find_pong_world


def pause_title(world: Optional[PongWorld]) -> str:
    """
    Title of the pause overlay, with the running score when a match is
    available.

    :param world: Paused Pong world, if any.
    :type world: PongWorld | None

    :return: Title text.
    :rtype: str
    """
    if world is None:
        return "PAUSED"
    snapshot = world.match.snapshot()
    return f"PAUSED  {snapshot.player_score} - {snapshot.ai_score}"


@register_scene("pause")
class PauseScene(BaseMenuScene):
    """
    Pause scene with options to continue or return to main menu.
    """

    @property
    def menu_title(self) -> str | None:
        return pause_title(find_pong_world(self.context.services.scenes))

    def menu_style(self) -> MenuStyle:
        return MenuStyle(
            overlay_color=(*BACKGROUND, 0.6),
            panel_color=(*BACKGROUND, 0.85),
            title_color=HIGHLIGHT,
            button_enabled=True,
            button_fill=BUTTON_FILL,
            button_border=BUTTON_BORDER,
            button_selected_border=HIGHLIGHT,
            normal=DIM,
            selected=WHITE,
            hint="ESC to resume",
            hint_color=DIM,
        )

    def menu_items(self):
        """Initialize the pause menu."""
        return [
            MenuItem("CONTINUE", "Continue", ContinueCommand),
            MenuItem(
                "MAIN_MENU",
                "Main Menu",
                BackToMenuCommand,
            ),
        ]

    def quit_command(self):
        return ContinueCommand()
