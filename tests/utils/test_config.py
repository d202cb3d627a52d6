"""
Unit tests for configuration validation

Tests the configuration system including:
- Frozen physics constants
- Display configuration validation
- JSON loading into the global display config
- Context manager for temporary display changes
"""

import json

import pytest
from pydantic import ValidationError

from classic_pong.utils import config as config_module
from classic_pong.utils.config import (
    KEYBOARD_LAYOUTS,
    DisplayConfig,
    GameConfig,
    display_config,
    display_config_tmp,
    game_config,
    load_display_config,
)


@pytest.fixture
def restore_display_config():
    """Put the global display config back after a test mutates it"""
    saved = display_config.model_dump()
    yield display_config
    for name, value in saved.items():
        setattr(display_config, name, value)


class TestGameConfig:
    """Test the physics constants"""

    def test_defaults(self):
        config = GameConfig()

        assert config.FIELD_WIDTH == 1280
        assert config.FIELD_HEIGHT == 720
        assert config.BALL_RADIUS == 15.0
        assert (config.BALL_VELOCITY_X, config.BALL_VELOCITY_Y) == (8.0, 8.0)
        assert (config.PADDLE_WIDTH, config.PADDLE_HEIGHT) == (20.0, 120.0)
        assert config.PADDLE_SPEED == 8.0
        assert config.PADDLE_CLAMP_MARGIN == 100.0

    def test_paddle_max_y_uses_clamp_margin(self):
        assert game_config.paddle_max_y == 620.0

    def test_frozen(self):
        with pytest.raises(ValidationError):
            game_config.FIELD_WIDTH = 800

    def test_field_too_narrow(self):
        with pytest.raises(ValidationError, match="FIELD_WIDTH"):
            GameConfig(FIELD_WIDTH=40)

    def test_field_too_short(self):
        with pytest.raises(ValidationError, match="FIELD_HEIGHT"):
            GameConfig(FIELD_HEIGHT=50)

    @pytest.mark.parametrize("field", ["BALL_RADIUS", "PADDLE_WIDTH", "PADDLE_SPEED"])
    def test_non_positive_rejected(self, field):
        with pytest.raises(ValidationError):
            GameConfig(**{field: 0})


class TestDisplayConfig:
    """Test display configuration validation"""

    def test_defaults(self):
        config = DisplayConfig()

        assert config.FPS == 60
        assert config.TITLE == "Pong"
        assert config.BACKGROUND_COLOR == (0, 0, 0)
        assert config.ENTITY_COLOR == (255, 255, 255)
        assert config.FONT_SIZE == 80
        assert config.KEYBOARD_LAYOUT == "qwerty"

    def test_zero_fps_rejected(self):
        with pytest.raises(ValidationError):
            DisplayConfig(FPS=0)

    def test_unknown_layout_rejected(self):
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            DisplayConfig(KEYBOARD_LAYOUT="dvorak")

    def test_bad_color_rejected(self):
        with pytest.raises(ValidationError, match="0-255"):
            DisplayConfig(FONT_COLOR=(256, 0, 0))

    def test_assignment_is_validated(self):
        config = DisplayConfig()
        with pytest.raises(ValidationError):
            config.FPS = -1
        assert config.FPS == 60

    def test_get_keyboard_layout(self):
        config = DisplayConfig(KEYBOARD_LAYOUT="azerty")
        assert config.get_keyboard_layout() is KEYBOARD_LAYOUTS["azerty"]

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "display.json"
        DisplayConfig(FPS=30, KEYBOARD_LAYOUT="azerty").save_to_file(path)

        loaded = DisplayConfig.load_from_file(path)

        assert loaded.FPS == 30
        assert loaded.KEYBOARD_LAYOUT == "azerty"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DisplayConfig.load_from_file(tmp_path / "missing.json")


class TestLoadDisplayConfig:
    """Test loading settings into the global display config"""

    def test_loads_into_global(self, tmp_path, restore_display_config):
        path = tmp_path / "display.json"
        path.write_text(json.dumps({"FPS": 120, "TITLE": "Pong!"}))

        assert load_display_config(path) is True
        assert display_config.FPS == 120
        assert display_config.TITLE == "Pong!"

    def test_missing_file_keeps_defaults(self, tmp_path, restore_display_config):
        assert load_display_config(tmp_path / "missing.json") is False
        assert display_config.FPS == 60

    def test_invalid_values_keep_defaults(self, tmp_path, restore_display_config):
        path = tmp_path / "display.json"
        path.write_text(json.dumps({"FPS": 0}))

        assert load_display_config(path) is False
        assert display_config.FPS == 60

    def test_malformed_json(self, tmp_path, restore_display_config):
        path = tmp_path / "display.json"
        path.write_text("{not json")

        assert load_display_config(path) is False

    def test_global_is_module_instance(self):
        assert config_module.display_config is display_config


class TestDisplayConfigTmp:
    """Test temporary display changes"""

    def test_values_restored(self):
        with display_config_tmp(FPS=30, TITLE="Temp"):
            assert display_config.FPS == 30
            assert display_config.TITLE == "Temp"
        assert display_config.FPS == 60
        assert display_config.TITLE == "Pong"

    def test_restored_after_exception(self):
        with pytest.raises(RuntimeError):
            with display_config_tmp(FPS=30):
                raise RuntimeError("boom")
        assert display_config.FPS == 60

    def test_invalid_change_applies_nothing(self):
        with pytest.raises(ValidationError):
            with display_config_tmp(TITLE="Half", FPS=0):
                pass
        assert display_config.TITLE == "Pong"
        assert display_config.FPS == 60
