"""Logging configuration for wikiprobe.

The library logger writes warnings to stderr. ``configure_logging`` adds a
daily-rotating log file for harness runs.

Adapted from CAMEL-AI (https://github.com/camel-ai/camel)
Copyright 2023-2026 @ CAMEL-AI.org. All Rights Reserved.
Licensed under the Apache License, Version 2.0
"""
from __future__ import annotations

import logging
import os
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wikiprobe.models.config import LoggingConfig

_logger = logging.getLogger("wikiprobe")

_FILE_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] %(name)s: %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

LEVEL_NAMES = {
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "information": logging.INFO,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


def _configure_library_logging() -> None:
    """Configure default logging for wikiprobe."""
    if _logger.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s %(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    handler.setLevel(logging.WARNING)
    _logger.addHandler(handler)
    _logger.setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name, prefixed with 'wikiprobe.'.

    Args:
        name: The name to append to 'wikiprobe.'.

    Returns:
        A logger instance with the name 'wikiprobe.{name}'.
    """
    return logging.getLogger(f"wikiprobe.{name}")


def parse_log_level(level: str | int) -> int:
    """Map a configured level name to a ``logging`` level.

    Accepts the stdlib names as well as "Verbose", "Information" and
    "Fatal". Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return LEVEL_NAMES.get(level.strip().lower(), logging.INFO)


def set_log_level(level: str | int) -> None:
    """Set the logging level for wikiprobe.

    Args:
        level: Logging level (e.g., 'DEBUG', 'Information', logging.DEBUG).
    """
    _logger.setLevel(parse_log_level(level))
    for handler in _logger.handlers:
        if isinstance(handler, TimedRotatingFileHandler):
            handler.setLevel(parse_log_level(level))


def configure_logging(config: "LoggingConfig") -> Path:
    """Attach the rotating run log described by ``config``.

    Console output stays at WARNING; the file receives everything at the
    configured level. Calling it again replaces the previous file handler.

    Returns:
        The log file path.
    """
    shutdown_logging()

    log_path = Path(config.log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    level = parse_log_level(config.log_level)

    file_handler = TimedRotatingFileHandler(
        log_path,
        when="midnight",
        backupCount=7,
        encoding="utf-8",
        delay=True,
    )
    file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    file_handler.setLevel(level)
    _logger.addHandler(file_handler)
    _logger.setLevel(level)

    _logger.info("Logger initialized with level: %s", logging.getLevelName(level))
    _logger.info("Log file path: %s", log_path)
    return log_path


def shutdown_logging() -> None:
    """Flush and detach the run log, if one is attached."""
    for handler in list(_logger.handlers):
        if isinstance(handler, TimedRotatingFileHandler):
            handler.flush()
            handler.close()
            _logger.removeHandler(handler)


if os.environ.get("WIKIPROBE_LOGGING_DISABLED", "false").lower() != "true":
    _configure_library_logging()
