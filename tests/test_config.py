"""
Tests for configuration loading.
"""

import logging
from datetime import date

import pytest

from taskcompletion import config as config_module
from taskcompletion.config import AppConfig, DefaultsConfig, load_config
from taskcompletion.domain.models import WorkWindow


def _write(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaultsConfig:
    """Tests for DefaultsConfig."""

    def test_defaults(self):
        """Without configuration a 9 AM - 5 PM window is used."""
        defaults = DefaultsConfig()

        assert defaults.get_working_window() == WorkWindow(9, 17)
        assert defaults.required_hours is None

    def test_hours_are_normalised(self):
        """Accepted spellings are stored in HH AM/PM form."""
        defaults = DefaultsConfig(working_hour_start="11 pm", working_hour_end="7AM")

        assert defaults.working_hour_start == "11 PM"
        assert defaults.working_hour_end == "07 AM"
        assert defaults.get_working_window() == WorkWindow(23, 7)

    def test_invalid_hour(self):
        """Hours outside 1-12 are rejected."""
        with pytest.raises(ValueError, match="between 1 and 12"):
            DefaultsConfig(working_hour_start="13 PM")

    def test_same_start_and_end(self):
        """A full-day window is rejected."""
        with pytest.raises(ValueError, match="cannot be the same"):
            DefaultsConfig(working_hour_start="9 AM", working_hour_end="09 am")

    def test_negative_required_hours(self):
        """The default duration must not be negative."""
        with pytest.raises(ValueError, match="must not be negative"):
            DefaultsConfig(required_hours=-1)


class TestAppConfig:
    """Tests for AppConfig."""

    def test_load_from_yaml(self, tmp_path):
        """A full config file is parsed into models."""
        path = _write(
            tmp_path,
            "defaults:\n"
            "  working_hour_start: '11 PM'\n"
            "  working_hour_end: '07 AM'\n"
            "  required_hours: 18\n"
            "leaves:\n"
            "  - 2022-12-19\n"
            "  - 2022-12-01\n"
            "  - 2022-12-19\n"
            "log_level: debug\n",
        )

        config = AppConfig.load_from_yaml(path)

        assert config.defaults.required_hours == 18
        assert config.defaults.get_working_window() == WorkWindow(23, 7)
        assert config.leaves == [date(2022, 12, 1), date(2022, 12, 19)]
        assert date(2022, 12, 19) in config.leave_set()
        assert config.log_level == "DEBUG"
        assert config.get_log_level() == logging.DEBUG

    def test_empty_file_uses_defaults(self, tmp_path):
        """An empty file is a valid configuration."""
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config.leaves == []
        assert config.log_level == "WARNING"

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Broken YAML raises ValueError."""
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "leaves: [2022-12-19\n"))

    def test_root_must_be_mapping(self, tmp_path):
        """A list at the root is rejected."""
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- 2022-12-19\n"))

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with pytest.raises(ValueError, match="log_level"):
            AppConfig(log_level="LOUD")


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_file(self, tmp_path):
        """An explicit path is loaded."""
        config = load_config(_write(tmp_path, "leaves: [2022-12-19]\n"))

        assert config.leaves == [date(2022, 12, 19)]

    def test_explicit_missing_file(self, tmp_path):
        """An explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_missing_default_file_uses_defaults(self, tmp_path, monkeypatch):
        """Without any config file the built-in defaults apply."""
        monkeypatch.setattr(config_module, "get_default_config_path", lambda: tmp_path / "config.yaml")

        config = load_config()

        assert config == AppConfig()
