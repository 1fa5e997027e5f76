"""Tests for configuration loading."""

import json
import tempfile
from pathlib import Path

from setlib.core.config import get_config_value, get_int_config_value, load_config


def _write_temp_config(content: str) -> str:
    with tempfile.NamedTemporaryFile(suffix='.json', delete=False, mode='w') as f:
        f.write(content)
        return f.name


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_empty(self):
        """Test that a missing config file gives an empty dict."""
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_config(str(Path(tmpdir) / "missing.json")) == {}

    def test_invalid_json_returns_empty(self):
        """Test that malformed JSON gives an empty dict."""
        config_path = _write_temp_config("{not json")
        try:
            assert load_config(config_path) == {}
        finally:
            Path(config_path).unlink()

    def test_non_mapping_returns_empty(self):
        """Test that a JSON list is ignored."""
        config_path = _write_temp_config("[1, 2]")
        try:
            assert load_config(config_path) == {}
        finally:
            Path(config_path).unlink()

    def test_loads_mapping(self):
        """Test loading a valid config file."""
        config_path = _write_temp_config(json.dumps({"power_set": {"warn_threshold": 12}}))
        try:
            assert load_config(config_path) == {"power_set": {"warn_threshold": 12}}
        finally:
            Path(config_path).unlink()


class TestGetConfigValue:
    """Tests for get_config_value."""

    def test_nested_lookup(self):
        """Test traversal of nested keys."""
        config = {"power_set": {"warn_threshold": 8}}
        assert get_config_value(["power_set", "warn_threshold"], config=config) == 8

    def test_default_when_missing(self, monkeypatch):
        """Test the default when neither config nor env has the key."""
        monkeypatch.delenv("POWER_SET_WARN_THRESHOLD", raising=False)
        assert get_config_value(["power_set", "warn_threshold"], default=20, config={}) == 20

    def test_env_fallback(self, monkeypatch):
        """Test the environment variable fallback."""
        monkeypatch.setenv("CLI_LOG_LEVEL", "DEBUG")
        assert get_config_value(["cli", "log_level"], default="WARNING", config={}) == "DEBUG"

    def test_config_wins_over_env(self, monkeypatch):
        """Test that the config file takes precedence."""
        monkeypatch.setenv("CLI_LOG_LEVEL", "DEBUG")
        config = {"cli": {"log_level": "ERROR"}}
        assert get_config_value(["cli", "log_level"], config=config) == "ERROR"

    def test_non_dict_intermediate_falls_back(self, monkeypatch):
        """Test that a scalar in the key path does not crash the lookup."""
        monkeypatch.delenv("POWER_SET_WARN_THRESHOLD", raising=False)
        config = {"power_set": 5}
        assert get_config_value(["power_set", "warn_threshold"], default=1, config=config) == 1


class TestGetIntConfigValue:
    """Tests for get_int_config_value."""

    def test_converts_env_string(self, monkeypatch):
        """Test that env values are converted to int."""
        monkeypatch.setenv("POWER_SET_WARN_THRESHOLD", "7")
        assert get_int_config_value(["power_set", "warn_threshold"], default=20, config={}) == 7

    def test_invalid_value_uses_default(self, monkeypatch):
        """Test that unparseable values fall back to the default."""
        monkeypatch.setenv("POWER_SET_WARN_THRESHOLD", "many")
        assert get_int_config_value(["power_set", "warn_threshold"], default=20, config={}) == 20
