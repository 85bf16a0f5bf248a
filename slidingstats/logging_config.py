"""Opt-in logging for slidingstats.

The library logger only carries a NullHandler, so nothing is printed unless
the caller asks for it:

    import slidingstats

    slidingstats.enable_console_logging(level="DEBUG")
    slidingstats.enable_file_logging("logs/stats.log", max_bytes=5_000_000)
    slidingstats.enable_json_logging()
    slidingstats.configure_from_env()

Environment variables read by ``configure_from_env``:
    SLIDINGSTATS_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    SLIDINGSTATS_LOG_FILE: Path to a rotating log file
    SLIDINGSTATS_LOG_JSON: "1" for JSON lines instead of plain text
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "slidingstats"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Renders each record as a single JSON line.

    Keys: ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``, ``message``
    and, when the record carries one, ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        payload = dict(
            timestamp=created.isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    """Resolve a level name or number; unknown names fall back to INFO."""
    if isinstance(level, str):
        return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)
    return level


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _make_formatter(json_format: bool, fmt: str, date_format: str) -> logging.Formatter:
    if json_format:
        return JsonFormatter()
    return logging.Formatter(fmt, date_format)


def _install(
    handler: logging.Handler,
    level: LogLevel | int,
    formatter: logging.Formatter,
) -> None:
    """Attach ``handler`` to the library logger with a shared level."""
    resolved = _get_level(level)
    handler.setFormatter(formatter)
    handler.setLevel(resolved)

    logger = _get_logger()
    logger.setLevel(resolved)
    logger.addHandler(handler)


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log slidingstats records to stderr as plain text.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    _install(handler, level, _make_formatter(False, format, date_format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    json_format: bool = False,
) -> RotatingFileHandler:
    """Log slidingstats records to a size-rotated file.

    Args:
        path: Log file. Parent directories are created.
        level: Log level name or int.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files kept.
        json_format: Write JSON lines instead of plain text.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    _install(handler, level, _make_formatter(json_format, DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log slidingstats records to stderr as JSON lines."""
    handler = logging.StreamHandler()
    _install(handler, level, _make_formatter(True, DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    return handler


def configure_from_env() -> None:
    """Enable logging from SLIDINGSTATS_* environment variables.

    Does nothing when neither SLIDINGSTATS_LOGGING nor SLIDINGSTATS_LOG_FILE
    is set.
    """
    level = os.environ.get("SLIDINGSTATS_LOGGING", "").upper()
    log_file = os.environ.get("SLIDINGSTATS_LOG_FILE", "")
    use_json = os.environ.get("SLIDINGSTATS_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if log_file:
        enable_file_logging(log_file, level=level, json_format=use_json)
    elif use_json:
        enable_json_logging(level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the slidingstats logger."""
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Close every handler on the slidingstats logger and silence it."""
    logger = _get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
