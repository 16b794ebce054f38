"""
Core module of Mini Pong game
"""

from mini_pong.core.entities import Ball
from mini_pong.core.entities import MatchState
from mini_pong.core.entities import Paddle
from mini_pong.core.entities import PaddleInput
from mini_pong.core.entities import Vector2D
from mini_pong.core.match import MatchController

__all__ = [
    "Ball",
    "Paddle",
    "PaddleInput",
    "MatchState",
    "MatchController",
    "Vector2D",
]
