"""
Keyboard input handling for Classic Pong
"""

from collections.abc import Collection
from collections.abc import Mapping

import pygame

from classic_pong.core.interfaces import FrameInput
from classic_pong.core.interfaces import PlayerInput
from classic_pong.utils.config import KeyboardLayout
from classic_pong.utils.config import display_config


class HumanPlayer:
    """One side of the table driven by a set of up keys and a set of down keys"""

    def __init__(self, name: str, up_keys: Collection[int], down_keys: Collection[int]):
        self.name = name
        self.up_keys = frozenset(up_keys)
        self.down_keys = frozenset(down_keys)

    def read_input(self, keys_pressed: Mapping[int, bool]) -> PlayerInput:
        """Any key bound to a direction triggers it"""
        return PlayerInput(
            up=any(keys_pressed.get(key, False) for key in self.up_keys),
            down=any(keys_pressed.get(key, False) for key in self.down_keys),
        )


class InputManager:
    """Turns held keys into a FrameInput for both players"""

    def __init__(self, layout: KeyboardLayout | None = None) -> None:
        layout = layout or display_config.get_keyboard_layout()
        self.layout = layout
        self.left = HumanPlayer("Left", layout.left_up, layout.left_down)
        self.right = HumanPlayer("Right", layout.right_up, layout.right_down)

    def snapshot(self, keys_pressed: Mapping[int, bool]) -> FrameInput:
        """Builds the frame input from a key code -> held mapping"""
        return FrameInput(
            left=self.left.read_input(keys_pressed),
            right=self.right.read_input(keys_pressed),
        )

    def poll(self) -> FrameInput:
        """Reads the live keyboard state from pygame"""
        pygame_keys = pygame.key.get_pressed()
        watched = (
            self.left.up_keys | self.left.down_keys | self.right.up_keys | self.right.down_keys
        )
        keys_pressed = {key: bool(pygame_keys[key]) for key in watched}
        return self.snapshot(keys_pressed)

    def get_control_info(self) -> dict[str, str]:
        """Get display names of the bound keys"""
        return self.layout.display_names.copy()
