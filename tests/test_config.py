"""Tests for settings and UI preferences."""

import json
import logging

import pytest

from whiteboard.config import settings, ui_config
from whiteboard.exceptions import ConfigurationError


class TestConfigDir:
    """Tests for get_config_dir."""

    def test_env_override(self, isolated_config_dir):
        assert settings.get_config_dir() == isolated_config_dir
        assert isolated_config_dir.is_dir()


class TestEnvVars:
    """Tests for environment variable validation."""

    def test_default_log_level(self):
        assert settings.get_log_level() == logging.INFO

    def test_log_level_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("WHITEBOARD_LOG_LEVEL", "debug")
        assert settings.get_log_level() == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("WHITEBOARD_LOG_LEVEL", "chatty")
        with pytest.raises(ConfigurationError) as excinfo:
            settings.get_log_level()
        assert excinfo.value.context["setting"] == "WHITEBOARD_LOG_LEVEL"

    def test_validate_unknown_var(self):
        assert settings.validate_env_var("SOMETHING_ELSE", "x") == (True, None)

    def test_unvalidated_read(self, monkeypatch):
        monkeypatch.setenv("WHITEBOARD_LOG_LEVEL", "chatty")
        assert settings.get_env_var("WHITEBOARD_LOG_LEVEL", validate=False) == "chatty"


class TestUiConfig:
    """Tests for ui_config.json handling."""

    def test_defaults_without_file(self):
        assert ui_config.load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_theme_round_trip(self):
        ui_config.set_theme("nord")
        assert ui_config.get_theme() == "nord"

    def test_merges_with_defaults(self):
        ui_config.get_ui_config_path().write_text(json.dumps({"theme": "gruvbox"}))
        config = ui_config.load_ui_config()
        assert config["theme"] == "gruvbox"
        assert "start_dir" in config

    def test_bad_json_falls_back(self):
        ui_config.get_ui_config_path().write_text("{not json")
        assert ui_config.load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_non_object_falls_back(self):
        ui_config.get_ui_config_path().write_text("[1, 2]")
        assert ui_config.load_ui_config() == ui_config.DEFAULT_CONFIG

    def test_start_dir(self, tmp_path):
        ui_config.save_ui_config({"start_dir": str(tmp_path)})
        assert ui_config.get_start_dir() == tmp_path

    def test_missing_start_dir_uses_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        ui_config.save_ui_config({"start_dir": str(tmp_path / "gone")})
        assert ui_config.get_start_dir() == tmp_path
