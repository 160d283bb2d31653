"""
Neon Pong: a player-versus-CPU paddle game.
"""

__version__ = "0.1.0"
