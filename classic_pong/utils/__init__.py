"""
Utility module for Classic Pong
"""

from classic_pong.utils.config import DisplayConfig
from classic_pong.utils.config import GameConfig
from classic_pong.utils.config import display_config
from classic_pong.utils.config import game_config

__all__ = ["game_config", "display_config", "GameConfig", "DisplayConfig"]
