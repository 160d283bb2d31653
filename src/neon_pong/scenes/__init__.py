"""
Scenes for Neon Pong: main menu, the match itself and its overlays.
"""
