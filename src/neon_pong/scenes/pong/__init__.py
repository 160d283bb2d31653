"""
Pong scene package.
"""
