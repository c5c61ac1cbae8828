# Area: Shared Tests
"""Tests for configuration loading and validation."""

import json
import os
from unittest.mock import patch

import pytest
from confidential_rps._config import GameConfig, load_config, validate_config, ENV_MAPPINGS


@pytest.fixture(autouse=True)
def clean_env():
    """Isolate os.environ; load_dotenv() writes to it."""
    with patch.dict(os.environ):
        for key in ENV_MAPPINGS:
            os.environ.pop(key, None)
        yield


class TestLoadConfig:
    """Tests for load_config() precedence."""

    def test_defaults(self, tmp_path):
        config = load_config(env_file=str(tmp_path / ".env"))
        assert config == GameConfig()
        assert config.think_delay_seconds == 1.5
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_json_file_values(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"think_delay_seconds": 0.25, "seed": 7, "unknown": 1}))
        config = load_config(str(path), env_file=None)
        assert config.think_delay_seconds == 0.25
        assert config.seed == 7

    def test_missing_json_file_uses_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "nope.json"), env_file=None)
        assert config == GameConfig()

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"seed": 7}))
        monkeypatch.setenv("RPS_SEED", "99")
        monkeypatch.setenv("RPS_LOG_LEVEL", "debug")
        config = load_config(str(path), env_file=None)
        assert config.seed == 99
        assert config.log_level == "DEBUG"

    def test_dotenv_file_is_read(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("RPS_THINK_DELAY_SECONDS=0\nRPS_LOG_FILE=logs/game.log\n")
        config = load_config(env_file=str(env_file))
        assert config.think_delay_seconds == 0.0
        assert config.log_file == "logs/game.log"

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("RPS_SEED=1\n")
        monkeypatch.setenv("RPS_SEED", "2")
        config = load_config(env_file=str(env_file))
        assert config.seed == 2

    def test_unparsable_value_raises(self, monkeypatch):
        monkeypatch.setenv("RPS_THINK_DELAY_SECONDS", "slow")
        with pytest.raises(ValueError):
            load_config(env_file=None)

    def test_infinite_delay_from_environment_raises(self, monkeypatch):
        monkeypatch.setenv("RPS_THINK_DELAY_SECONDS", "inf")
        with pytest.raises(ValueError, match="finite"):
            load_config(env_file=None)


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError, match="think_delay_seconds"):
            validate_config(GameConfig(think_delay_seconds=-0.5))

    @pytest.mark.parametrize("delay", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_delay_rejected(self, delay):
        with pytest.raises(ValueError, match="finite"):
            validate_config(GameConfig(think_delay_seconds=delay))

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="log level"):
            validate_config(GameConfig(log_level="LOUD"))

    def test_log_level_value(self):
        assert GameConfig(log_level="WARNING").log_level_value == 30
