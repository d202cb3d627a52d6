"""
Core module of Classic Pong game
"""

from classic_pong.core.entities import Ball
from classic_pong.core.entities import Paddle
from classic_pong.core.entities import Vector2D
from classic_pong.core.interfaces import FrameInput
from classic_pong.core.interfaces import PlayerInput
from classic_pong.core.physics import GameState

__all__ = [
    "Ball",
    "Paddle",
    "GameState",
    "FrameInput",
    "PlayerInput",
    "Vector2D",
]
