"""Tests for configuration helpers."""

from pathlib import Path

import pytest
from trainup_load.config import Config


class TestConfig:
    """Test Config helpers."""

    def test_sessions_csv_explicit(self, monkeypatch):
        """An explicit path wins over the environment default."""
        monkeypatch.setattr(Config, "SESSIONS_CSV", "default.csv")
        assert Config.get_sessions_csv("mine.csv") == Path("mine.csv")
        assert Config.get_sessions_csv() == Path("default.csv")

    def test_sessions_csv_missing(self, monkeypatch):
        """No path at all is a configuration error."""
        monkeypatch.setattr(Config, "SESSIONS_CSV", "")
        with pytest.raises(ValueError, match="SESSIONS_CSV"):
            Config.get_sessions_csv()

    def test_log_level(self, monkeypatch):
        """Unknown log levels fall back to INFO."""
        monkeypatch.setattr(Config, "LOG_LEVEL", "debug")
        assert Config.get_log_level() == "DEBUG"
        monkeypatch.setattr(Config, "LOG_LEVEL", "chatty")
        assert Config.get_log_level() == "INFO"
