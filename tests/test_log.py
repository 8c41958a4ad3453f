"""
Tests for logging setup helpers.
"""

import logging

import pytest

from gigmatch import log
from gigmatch.log import get_logger


class TestLogSettings:

    def test_log_dir_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GIGMATCH_LOG_DIR", str(tmp_path / "custom"))
        assert log._log_dir() == tmp_path / "custom"

    def test_log_dir_default(self, monkeypatch):
        monkeypatch.delenv("GIGMATCH_LOG_DIR", raising=False)
        assert log._log_dir().name == "logs"

    @pytest.mark.parametrize(
        "value,enabled",
        [("true", True), ("1", True), (" YES ", True), ("false", False), ("0", False)],
    )
    def test_file_logging_switch(self, monkeypatch, value, enabled):
        monkeypatch.setenv("GIGMATCH_LOG_FILE", value)
        assert log._file_logging_enabled() is enabled


class TestDailyFileHandler:

    def test_creates_dated_file(self, tmp_path):
        handler = log._daily_file_handler(tmp_path / "logs")
        try:
            assert handler.level == logging.DEBUG
            files = list((tmp_path / "logs").glob("gigmatch_*.log"))
            assert len(files) == 1
        finally:
            handler.close()


def test_get_logger_returns_named_logger():
    assert get_logger("gigmatch.scorer").name == "gigmatch.scorer"
