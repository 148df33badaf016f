import pytest

from asciibreakout.game.game_config import GameConfig, GameFactory


class TestGameConfig:
    """Test defaults and validation"""

    def test_defaults(self):
        config = GameConfig()
        assert (config.width, config.height) == (60, 36)
        assert config.starting_lives == 5
        assert config.paddle_row == 33
        assert config.observation_shape == (6, 36, 60)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"width": 8},
            {"height": 5},
            {"starting_lives": 0},
            {"frame_ms": -1},
            {"paddle_step_interval": 0},
        ],
    )
    def test_validate_rejects(self, kwargs):
        with pytest.raises(ValueError):
            GameConfig(**kwargs).validate()

    def test_factory(self):
        assert GameFactory.default() == GameConfig()
        small = GameFactory.small()
        assert (small.width, small.height, small.starting_lives) == (20, 12, 3)
        custom = GameFactory.custom(width=30, height=18, starting_lives=2)
        assert (custom.width, custom.height, custom.starting_lives) == (30, 18, 2)
        with pytest.raises(ValueError):
            GameFactory.custom(width=4, height=18)


class TestConfigFromEnv:
    """Test reading settings from the environment"""

    def test_defaults_without_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("BREAKOUT_STARTING_LIVES", "BREAKOUT_FRAME_MS", "BREAKOUT_PADDLE_STEP"):
            monkeypatch.delenv(name, raising=False)
        assert GameConfig.from_env() == GameConfig()

    def test_values_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BREAKOUT_STARTING_LIVES", "9")
        monkeypatch.setenv("BREAKOUT_FRAME_MS", "12")
        monkeypatch.setenv("BREAKOUT_PADDLE_STEP", "2")

        config = GameConfig.from_env()

        assert config.starting_lives == 9
        assert config.frame_ms == 12
        assert config.paddle_step_interval == 2

    def test_non_numeric_value(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BREAKOUT_FRAME_MS", "fast")
        with pytest.raises(ValueError):
            GameConfig.from_env()

    def test_out_of_range_value(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("BREAKOUT_STARTING_LIVES", "0")
        with pytest.raises(ValueError):
            GameConfig.from_env()
