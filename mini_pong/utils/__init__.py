"""
Utility module of Mini Pong game
"""

from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config
from mini_pong.utils.config import game_config_tmp

__all__ = ["game_config", "game_config_tmp", "GameConfig"]
