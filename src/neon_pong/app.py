"""
Main application for Neon Pong.
"""

from __future__ import annotations

from mini_arcade_core import (  # pyright: ignore[reportMissingImports]
    EngineConfig,
    SceneConfig,
    run_game,
)
from mini_arcade_core.utils import logger

# Justification: in editable installs, this module is provided by the package.
# pylint: disable=no-name-in-module
from mini_arcade_native_backend import (  # pyright: ignore[reportMissingImports]
    AudioSettings,
    BackendSettings,
    FontSettings,
    NativeBackend,
    RendererSettings,
    WindowSettings,
)

from neon_pong.constants import ASSETS_ROOT, BACKGROUND, FPS, WINDOW_SIZE
from neon_pong.scenes.pong.audio import sound_files

# pylint: enable=no-name-in-module


def run():
    """
    Main entry point for Neon Pong.

    - Auto-discovers scenes from the `neon_pong.scenes` package.
    - Configures the native backend with the game font and sounds.
    - Runs the game with the initial scene set to "menu".
    """
    font_path = ASSETS_ROOT / "fonts" / "neon.ttf"

    w_width, w_height = WINDOW_SIZE
    backend_settings = BackendSettings(
        window=WindowSettings(
            width=w_width,
            height=w_height,
            title="Neon Pong",
            high_dpi=False,
        ),
        renderer=RendererSettings(background_color=BACKGROUND),
        fonts=[FontSettings(name="default", path=str(font_path), size=24)],
        audio=AudioSettings(
            enable=True,
            sounds=sound_files(),
        ),
    )
    backend = NativeBackend(settings=backend_settings)

    engine_config = EngineConfig(fps=FPS, virtual_resolution=WINDOW_SIZE)
    scene_config = SceneConfig(
        initial_scene="menu",
        discover_packages=["neon_pong.scenes", "mini_arcade_core.scenes"],
    )
    logger.info("Starting Neon Pong...")
    run_game(
        engine_config=engine_config,
        backend=backend,
        scene_config=scene_config,
    )


if __name__ == "__main__":
    run()
