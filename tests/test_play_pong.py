"""
Tests for the command line launcher
"""

import json

import pytest

import play_pong
from classic_pong.utils.config import display_config


class FakeApp:
    """Stands in for PongApp so no window is opened"""

    instances: list["FakeApp"] = []

    def __init__(self, input_manager=None) -> None:
        self.input_manager = input_manager
        self.ran = False
        FakeApp.instances.append(self)

    def run(self, max_frames=None) -> tuple[int, int]:
        self.ran = True
        return (2, 3)


@pytest.fixture
def fake_app(monkeypatch):
    FakeApp.instances = []
    monkeypatch.setattr(play_pong, "PongApp", FakeApp)
    saved = display_config.model_dump()
    yield FakeApp
    for name, value in saved.items():
        setattr(display_config, name, value)


class TestMain:
    """Tests for play_pong.main"""

    def test_normal_run(self, fake_app, capsys) -> None:
        assert play_pong.main([]) == 0

        assert fake_app.instances[0].ran is True
        out = capsys.readouterr().out
        assert "W/D up" in out
        assert "Final score: 2 - 3" in out

    def test_zero_fps_rejected(self, fake_app) -> None:
        assert play_pong.main(["--fps", "0"]) == 2
        assert fake_app.instances == []
        assert display_config.FPS == 60

    def test_fps_applied(self, fake_app) -> None:
        assert play_pong.main(["--fps", "30"]) == 0
        assert display_config.FPS == 30

    def test_layout_applied(self, fake_app) -> None:
        assert play_pong.main(["--layout", "azerty"]) == 0

        assert display_config.KEYBOARD_LAYOUT == "azerty"
        assert fake_app.instances[0].input_manager.get_control_info()["left_up"] == "Z/D"

    def test_missing_config_exits_non_zero(self, fake_app, tmp_path) -> None:
        assert play_pong.main(["--config", str(tmp_path / "missing.json")]) == 2
        assert fake_app.instances == []

    def test_invalid_config_exits_non_zero(self, fake_app, tmp_path) -> None:
        path = tmp_path / "display.json"
        path.write_text(json.dumps({"FPS": 0}))

        assert play_pong.main(["--config", str(path)]) == 2

    def test_config_file_loaded(self, fake_app, tmp_path) -> None:
        path = tmp_path / "display.json"
        path.write_text(json.dumps({"FPS": 90}))

        assert play_pong.main(["--config", str(path), "--log-level", "DEBUG"]) == 0
        assert display_config.FPS == 90

    def test_crash_returns_one(self, fake_app, monkeypatch) -> None:
        def boom(self, max_frames=None):
            raise RuntimeError("display lost")

        monkeypatch.setattr(FakeApp, "run", boom)
        assert play_pong.main([]) == 1

    def test_unknown_layout_is_argparse_error(self, fake_app) -> None:
        with pytest.raises(SystemExit):
            play_pong.main(["--layout", "dvorak"])
