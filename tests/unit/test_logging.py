"""Tests for wikiprobe.utils.logging."""
from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import pytest

from wikiprobe.models.config import LoggingConfig
from wikiprobe.utils.logging import (
    configure_logging,
    get_logger,
    parse_log_level,
    set_log_level,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def restore_logger():
    root = logging.getLogger("wikiprobe")
    level = root.level
    yield
    shutdown_logging()
    root.setLevel(level)


def _file_handlers():
    return [
        h for h in logging.getLogger("wikiprobe").handlers
        if isinstance(h, TimedRotatingFileHandler)
    ]


class TestLevels:

    @pytest.mark.parametrize("name, level", [
        ("Verbose", logging.DEBUG),
        ("Debug", logging.DEBUG),
        ("Information", logging.INFO),
        ("warning", logging.WARNING),
        ("Error", logging.ERROR),
        ("Fatal", logging.CRITICAL),
        (" INFO ", logging.INFO),
    ])
    def test_parse_log_level(self, name, level):
        assert parse_log_level(name) == level

    def test_unknown_level(self):
        assert parse_log_level("chatty") == logging.INFO

    def test_numeric_level(self):
        assert parse_log_level(logging.ERROR) == logging.ERROR

    def test_set_log_level(self):
        set_log_level("Debug")
        assert logging.getLogger("wikiprobe").level == logging.DEBUG


class TestGetLogger:

    def test_prefix(self):
        assert get_logger("mediawiki").name == "wikiprobe.mediawiki"


class TestConfigureLogging:

    def test_writes_log_file(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "run.log"
        path = configure_logging(LoggingConfig(log_level="Debug", log_file_path=str(log_file)))
        assert path == log_file

        get_logger("test").debug("hello from the harness")
        shutdown_logging()

        text = log_file.read_text(encoding="utf-8")
        assert "Logger initialized with level: DEBUG" in text
        assert "[DEBUG] wikiprobe.test: hello from the harness" in text

    def test_level_filters(self, tmp_path: Path):
        log_file = tmp_path / "run.log"
        configure_logging(LoggingConfig(log_level="Warning", log_file_path=str(log_file)))
        get_logger("test").info("hidden")
        get_logger("test").warning("shown")
        shutdown_logging()

        text = log_file.read_text(encoding="utf-8")
        assert "hidden" not in text
        assert "shown" in text

    def test_reconfigure_replaces_handler(self, tmp_path: Path):
        configure_logging(LoggingConfig(log_file_path=str(tmp_path / "a.log")))
        configure_logging(LoggingConfig(log_file_path=str(tmp_path / "b.log")))
        assert len(_file_handlers()) == 1

    def test_shutdown_detaches(self, tmp_path: Path):
        configure_logging(LoggingConfig(log_file_path=str(tmp_path / "a.log")))
        shutdown_logging()
        assert _file_handlers() == []
