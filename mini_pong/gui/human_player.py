"""
Keyboard input for Mini Pong paddles
"""

from collections.abc import Sequence

import pygame

from mini_pong.core.entities import PaddleInput
from mini_pong.utils.config import game_config


def key_from_name(name: str) -> int:
    """Converts a key name such as "w" or "up" into its pygame constant"""
    key = getattr(pygame, f"K_{name}", None)
    if key is None:
        raise ValueError(f"Unknown key name: {name!r}")
    return int(key)


class KeyboardInput:
    """Reads a fixed up/down key pair as instantaneous "is held" state"""

    def __init__(self, up_key: int, down_key: int, name: str = "Player"):
        self.up_key = up_key
        self.down_key = down_key
        self.name = name

    @classmethod
    def from_names(cls, key_names: Sequence[str], name: str = "Player") -> "KeyboardInput":
        """Builds an input from a pair of key names"""
        up_name, down_name = key_names
        return cls(key_from_name(up_name), key_from_name(down_name), name)

    def read_keys(self, keys_pressed: Sequence[bool]) -> PaddleInput:
        """Resolves the control signals from a key state table"""
        return PaddleInput(
            move_up=bool(keys_pressed[self.up_key]),
            move_down=bool(keys_pressed[self.down_key]),
        )

    def get_input(self) -> PaddleInput:
        """Polls the keyboard for the current tick"""
        return self.read_keys(pygame.key.get_pressed())


def create_keyboard_inputs() -> tuple[KeyboardInput, KeyboardInput]:
    """Creates the player (W/S) and enemy (I/K) keyboard inputs"""
    player = KeyboardInput.from_names(game_config.PLAYER_KEYS, "Player")
    enemy = KeyboardInput.from_names(game_config.ENEMY_KEYS, "Enemy")
    return player, enemy
