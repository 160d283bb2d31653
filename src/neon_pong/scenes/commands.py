"""
Module defining game commands for Neon Pong.

Scene changes go through the scene manager. The match is looked up on the
scene stack because the context world belongs to the topmost scene, which
is a menu world while the pause or game over overlay is up.
"""

from __future__ import annotations

from mini_arcade_core.engine.commands import Command, CommandContext
from mini_arcade_core.utils import logger

from neon_pong.scenes.pong.models import find_pong_world


class StartGameCommand(Command):
    """BaseCommand to start the game."""

    def execute(
        self,
        context: CommandContext,
    ):
        context.managers.scenes.change("pong")


class PauseGameCommand(Command):
    """
    Command to pause the match and show the pause overlay.
    """

    def execute(self, context: CommandContext):
        world = find_pong_world(context.managers.scenes)
        if world is not None and world.match.pause():
            context.managers.scenes.push("pause", as_overlay=True)


class ContinueCommand(Command):
    """
    Command to continue the game from pause.
    """

    def execute(self, context: CommandContext):
        world = find_pong_world(context.managers.scenes)
        if world is None:
            logger.warning("Continue issued without a match on the stack")
        else:
            world.match.resume()

        context.managers.scenes.pop()


class RestartCommand(Command):
    """
    Command to restart the match.

    The match engine goes back to its start state; issuing this command is
    the player's explicit request to play again, so the match is started
    right away.
    """

    def __init__(self, close_overlay: bool = False):
        """
        :param close_overlay: Pop the overlay this was issued from.
        :type close_overlay: bool
        """
        self.close_overlay = close_overlay

    def execute(self, context: CommandContext):
        world = find_pong_world(context.managers.scenes)
        if world is None:
            logger.warning("Restart issued without a match on the stack")
        else:
            world.match.restart()
            world.match.start()
            world.pending_cues.clear()
            logger.info("Restarting match")

        if self.close_overlay:
            context.managers.scenes.pop()


class GameOverCommand(Command):
    """
    Command to show the game over overlay.
    """

    def execute(self, context: CommandContext):
        context.managers.scenes.push("game_over", as_overlay=True)


class BackToMenuCommand(Command):
    """
    Command to return to the main menu.
    """

    def execute(self, context: CommandContext):
        context.managers.scenes.change("menu")
