"""
Mini Pong: two paddles, a bouncing ball and a score counter
"""

__version__ = "0.1.0"
