"""
Game over overlay for Neon Pong.
"""

from __future__ import annotations

from functools import partial
from typing import Optional

from mini_arcade_core.scenes.autoreg import register_scene
from mini_arcade_core.ui.menu import BaseMenuScene, MenuItem, MenuStyle

from neon_pong.constants import (
    BALL_COLOR,
    BUTTON_BORDER,
    BUTTON_FILL,
    DIM,
    HIGHLIGHT,
    PADDLE_COLOR,
    WHITE,
)
from neon_pong.scenes.commands import BackToMenuCommand, RestartCommand
from neon_pong.scenes.pong.models import PongWorld, find_pong_world

WINNER_TITLES = {"player": "YOU WIN!", "ai": "AI WINS!"}


def game_over_title(world: Optional[PongWorld]) -> str:
    """Winner banner, or a plain "GAME OVER" without a finished match."""
    if world is None:
        return "GAME OVER"
    return WINNER_TITLES.get(world.match.snapshot().winner, "GAME OVER")


def final_score(world: Optional[PongWorld]) -> Optional[str]:
    """Footer line with the final score."""
    if world is None:
        return None
    snapshot = world.match.snapshot()
    return f"Final Score: {snapshot.player_score} - {snapshot.ai_score}"


@register_scene("game_over")
class GameOverScene(BaseMenuScene):
    """
    Shown once a side reaches the winning score.
    """

    @property
    def menu_title(self) -> str | None:
        return game_over_title(find_pong_world(self.context.services.scenes))

    def menu_style(self) -> MenuStyle:
        world = find_pong_world(self.context.services.scenes)
        player_won = (
            world is not None and world.match.snapshot().winner == "player"
        )
        return MenuStyle(
            overlay_color=(0, 0, 0, 0.6),
            panel_color=(0, 29, 61, 0.8),
            title_color=PADDLE_COLOR if player_won else BALL_COLOR,
            button_enabled=True,
            button_fill=BUTTON_FILL,
            button_border=BUTTON_BORDER,
            button_selected_border=HIGHLIGHT,
            normal=DIM,
            selected=WHITE,
            hint=final_score(world),
            hint_color=WHITE,
        )

    def menu_items(self):
        return [
            MenuItem(
                "PLAY_AGAIN",
                "Play Again",
                partial(RestartCommand, close_overlay=True),
            ),
            MenuItem("MAIN_MENU", "Main Menu", BackToMenuCommand),
        ]
