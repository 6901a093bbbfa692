"""
test_config.py
--------------
Tests for settings and logging setup.
"""
import logging
from pathlib import Path

from recordbook.config import DATA_FILE, HOME_ENV, LOG_FILE, LOG_LEVEL_ENV, Settings
from recordbook.log import setup_logging


class TestSettings:
    """Test Settings.from_env."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv(HOME_ENV, raising=False)
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        settings = Settings.from_env()
        assert settings.data_dir == Path("data")
        assert settings.log_level == "INFO"
        assert settings.data_file == Path("data") / DATA_FILE
        assert settings.log_dir == Path("data") / "logs"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv(HOME_ENV, "/tmp/rb")
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        settings = Settings.from_env()
        assert settings.data_dir == Path("/tmp/rb")
        assert settings.log_level == "DEBUG"

    def test_arguments_win(self, monkeypatch):
        monkeypatch.setenv(HOME_ENV, "/tmp/rb")
        settings = Settings.from_env("elsewhere", "warning")
        assert settings.data_dir == Path("elsewhere")
        assert settings.log_level == "WARNING"


class TestSetupLogging:
    """Test setup_logging."""

    def test_writes_log_file(self, tmp_path):
        logger = setup_logging(tmp_path / "logs", "DEBUG")
        logging.getLogger("recordbook.storage").info("hello from storage")
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / "logs" / LOG_FILE).read_text(encoding="utf-8")
        assert "hello from storage" in text
        assert "recordbook.storage" in text

    def test_repeated_setup_does_not_duplicate_handlers(self, tmp_path):
        setup_logging(tmp_path)
        logger = setup_logging(tmp_path)
        assert len(logger.handlers) == 2
