"""Opt-in logging for keyedsets.

The library only attaches a NullHandler to the ``keyedsets`` logger, so it is
silent until one of these helpers is called:

    import keyedsets

    keyedsets.enable_console_logging(level="DEBUG")
    keyedsets.enable_file_logging("logs/keyedsets.log")
    keyedsets.enable_json_logging()
    keyedsets.configure_from_env()

Environment variables read by configure_from_env():
    KEYEDSETS_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    KEYEDSETS_LOG_FILE: Path of a rotating log file
    KEYEDSETS_LOG_JSON: "1" switches output to JSON lines
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
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEFAULT_BACKUP_COUNT = 3

LOGGER_NAME = "keyedsets"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON document.

    Keys are ``timestamp`` (UTC, ISO 8601), ``level``, ``logger`` and
    ``message``; ``exception`` is added when the record carries a traceback.
    A merge call at DEBUG renders as:

        {"timestamp": "...", "level": "DEBUG", "logger": "keyedsets.merger",
         "message": "merge: pooled=8 eligible_keys=5 result=5"}
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
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Detach and close every handler except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _install(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter):
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return handler


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send keyedsets logs to stderr.

    Args:
        level: Log level name or int.
        format: Message format string.
        date_format: Format for %(asctime)s.

    Returns:
        The installed StreamHandler.
    """
    return _install(logging.StreamHandler(), level, logging.Formatter(format, date_format))


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    json_format: bool = False,
) -> RotatingFileHandler:
    """Write keyedsets logs to a size-rotated file.

    Args:
        path: Log file path. Missing parent directories are created.
        level: Log level name or int.
        max_bytes: Size at which the file is rotated.
        backup_count: Number of rotated files kept.
        json_format: Write JSON lines instead of plain text.

    Returns:
        The installed RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    formatter = JsonFormatter() if json_format else logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATE_FORMAT)
    return _install(handler, level, formatter)


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Send keyedsets logs to stderr as JSON lines."""
    return _install(logging.StreamHandler(), level, JsonFormatter())


def configure_from_env() -> None:
    """Install a handler chosen by the KEYEDSETS_* variables.

    A log file wins over the console; KEYEDSETS_LOG_JSON=1 switches either
    one to JSON lines. The level defaults to INFO once a file is given. With
    neither KEYEDSETS_LOGGING nor KEYEDSETS_LOG_FILE set, the library stays
    silent.
    """
    env = os.environ
    level = env.get("KEYEDSETS_LOGGING", "").upper()
    log_file = env.get("KEYEDSETS_LOG_FILE", "")
    as_json = env.get("KEYEDSETS_LOG_JSON", "") == "1"

    if log_file:
        enable_file_logging(log_file, level=level or "INFO", json_format=as_json)
    elif level:
        if as_json:
            enable_json_logging(level=level)
        else:
            enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one submodule logger, e.g. ``set_module_level("merger", "DEBUG")``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the keyedsets logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
