"""
Classic Pong configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Key codes for each paddle action; every action accepts several keys"""

    name: str
    left_up: tuple[int, ...]
    left_down: tuple[int, ...]
    right_up: tuple[int, ...]
    right_down: tuple[int, ...]
    display_names: dict[str, str]


# Arrow keys are shared: up/right raise the right paddle, down/left lower it
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_up=(pygame.K_w, pygame.K_d),
        left_down=(pygame.K_s, pygame.K_a),
        right_up=(pygame.K_UP, pygame.K_RIGHT),
        right_down=(pygame.K_DOWN, pygame.K_LEFT),
        display_names={"left_up": "W/D", "left_down": "S/A", "right_up": "↑/→", "right_down": "↓/←"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_up=(pygame.K_z, pygame.K_d),  # Z instead of W
        left_down=(pygame.K_s, pygame.K_q),  # Q instead of A
        right_up=(pygame.K_UP, pygame.K_RIGHT),
        right_down=(pygame.K_DOWN, pygame.K_LEFT),
        display_names={"left_up": "Z/D", "left_down": "S/Q", "right_up": "↑/→", "right_down": "↓/←"},
    ),
}


class GameConfig(BaseModel):
    """Fixed physics constants, validated once and never changed at runtime"""

    model_config = {"frozen": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=1280, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=720, gt=0, description="Field height in pixels")

    # Ball physics (per frame, no delta time)
    BALL_RADIUS: float = Field(default=15.0, gt=0, description="Ball radius in pixels")
    BALL_VELOCITY_X: float = Field(default=8.0, description="Initial horizontal ball velocity")
    BALL_VELOCITY_Y: float = Field(default=8.0, description="Initial vertical ball velocity")

    # Player paddles
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=120.0, gt=0, description="Paddle height in pixels")
    PADDLE_SPEED: float = Field(default=8.0, gt=0, description="Paddle step per frame")
    PADDLE_MARGIN: float = Field(default=5.0, ge=0, description="Paddle margin from edge")
    # Lowest paddle top is FIELD_HEIGHT minus this, not minus PADDLE_HEIGHT
    PADDLE_CLAMP_MARGIN: float = Field(default=100.0, ge=0, description="Paddle clamp margin")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the field is large enough for game elements"""
        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH) + 2 * self.BALL_RADIUS
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        if self.FIELD_HEIGHT < self.PADDLE_CLAMP_MARGIN:
            raise ValueError(
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT}) must be at least "
                f"PADDLE_CLAMP_MARGIN ({self.PADDLE_CLAMP_MARGIN})"
            )

        return self

    @property
    def paddle_max_y(self) -> float:
        """Upper bound for a paddle's top edge"""
        return self.FIELD_HEIGHT - self.PADDLE_CLAMP_MARGIN


class DisplayConfig(BaseModel):
    """Window, colors and controls, editable at startup"""

    model_config = {"validate_assignment": True}

    FPS: int = Field(default=60, gt=0, description="Frames per second")
    TITLE: str = Field(default="Pong", description="Window title")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    ENTITY_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    FONT_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    FONT_SIZE: int = Field(default=80, gt=0, description="Score font size in pixels")
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    @field_validator("BACKGROUND_COLOR", "ENTITY_COLOR", "FONT_COLOR")
    @classmethod
    def validate_color(cls, v: tuple[int, int, int]) -> tuple[int, int, int]:
        """Validate each channel is a byte"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be within 0-255, got {v}")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def save_to_file(self, filepath: str | Path = "classic_pong_display.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.model_dump(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str | Path = "classic_pong_display.json") -> "DisplayConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instances
game_config = GameConfig()
display_config = DisplayConfig()


def load_display_config(filepath: str | Path) -> bool:
    """Load display settings from file into the global display_config"""
    try:
        loaded_config = DisplayConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Display config %s not found, keeping defaults", filepath)
        return False
    except (ValidationError, json.JSONDecodeError) as e:
        logger.error("Invalid display config %s: %s", filepath, e)
        return False

    for field_name in DisplayConfig.model_fields:
        setattr(display_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def display_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify display config (with validation)"""
    # Validate the whole change up front so a bad value leaves nothing half-applied
    DisplayConfig(**{**display_config.model_dump(), **kwargs})
    old_values = _change_values(display_config, **kwargs)
    try:
        yield
    finally:
        _change_values(display_config, **old_values)
