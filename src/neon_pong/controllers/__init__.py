"""
Paddle controllers: the human player and the CPU.
"""
