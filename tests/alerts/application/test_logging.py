"""Tests for the alerts logging configuration."""

import logging

import pytest
import structlog
from alerts.utils.logging import ERROR_LOG_FILE, LOG_FILE, configure_logging, get_log_level


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestLogLevel:
    @pytest.mark.parametrize(
        "env, expected",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING")],
    )
    def test_level_follows_environment(self, monkeypatch, env, expected):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", env)
        assert get_log_level() == expected

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert get_log_level() == "ERROR"


class TestConfigureLogging:
    def test_writes_alerts_log_files(self, tmp_path, restore_logging):
        configure_logging(tmp_path)

        logging.getLogger("alerts.test").error("Native notification failed")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Native notification failed" in (tmp_path / LOG_FILE).read_text(encoding="utf-8")
        assert "Native notification failed" in (tmp_path / ERROR_LOG_FILE).read_text(encoding="utf-8")

    def test_error_log_skips_lower_levels(self, tmp_path, monkeypatch, restore_logging):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        configure_logging(tmp_path)

        logging.getLogger("alerts.test").info("Push device registered")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "Push device registered" in (tmp_path / LOG_FILE).read_text(encoding="utf-8")
        assert (tmp_path / ERROR_LOG_FILE).read_text(encoding="utf-8") == ""
