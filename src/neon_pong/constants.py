"""
Constants for Neon Pong.
"""

from __future__ import annotations

from pathlib import Path

ASSETS_ROOT = Path(__file__).resolve().parent / "assets"

WINDOW_SIZE = (900, 600)
FPS = 60

PADDLE_SIZE = (15, 100)
# distance between a side wall and its paddle
PADDLE_INSET = 30

# palette
BACKGROUND = (0, 8, 20)
PADDLE_COLOR = (0, 217, 255)
BALL_COLOR = (255, 0, 110)
PARTICLE_COLOR = (0, 217, 255)
CENTER_LINE_COLOR = (255, 255, 255, 0.1)
WHITE = (255, 255, 255)
DIM = (140, 140, 160)
HIGHLIGHT = (0, 217, 255)
BUTTON_FILL = (10, 20, 40, 0.9)
BUTTON_BORDER = (60, 80, 120)
