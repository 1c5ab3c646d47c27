"""Logging setup for checkoutsim.

The package logger carries only a NullHandler, so nothing is printed unless
the caller opts in:

    import checkoutsim

    checkoutsim.enable_console_logging(level="DEBUG")
    checkoutsim.enable_file_logging("runs/checkout.log")
    checkoutsim.enable_json_logging()
    checkoutsim.configure_from_env()

Engine records carry the simulated clock as ``sim_time`` (``hh:mm:ss``).
Records without one, such as setup messages, show ``-``.

Environment variables read by ``configure_from_env``:
    CHECKOUTSIM_LOGGING   level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CHECKOUTSIM_LOG_FILE  write to this rotating file instead of stderr
    CHECKOUTSIM_LOG_JSON  "1" for one JSON object per line
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

LOGGER_NAME = "checkoutsim"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s [%(sim_time)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"

ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_KEEP = 3

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SimTimeFilter(logging.Filter):
    """Gives every record a ``sim_time`` attribute so formats can use it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "sim_time"):
            record.sim_time = "-"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp`` (UTC, ISO 8601), ``level``, ``logger``, ``message``,
    plus ``sim_time`` when the record has a simulated clock and
    ``exception`` when it carries exc_info.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        sim_time = getattr(record, "sim_time", "-")
        if sim_time != "-":
            payload["sim_time"] = sim_time
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(
    handler: logging.Handler,
    level: LogLevel | int,
    formatter: logging.Formatter,
) -> logging.Handler:
    numeric = _get_level(level)
    handler.setFormatter(formatter)
    handler.setLevel(numeric)
    handler.addFilter(SimTimeFilter())
    logger = _get_logger()
    logger.setLevel(numeric)
    logger.addHandler(handler)
    return handler


def _rotating_file(path: str | Path, max_bytes: int, backup_count: int) -> RotatingFileHandler:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = TEXT_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.StreamHandler:
    """Log checkoutsim records to stderr and return the handler."""
    return _attach(logging.StreamHandler(), level, logging.Formatter(format, date_format))


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = ROTATE_BYTES,
    backup_count: int = ROTATE_KEEP,
    format: str = TEXT_FORMAT,
    date_format: str = DATE_FORMAT,
) -> RotatingFileHandler:
    """Log checkoutsim records to a rotating file.

    Args:
        path: Log file. Missing parent directories are created.
        level: Level name or number.
        max_bytes: Size at which the file rolls over.
        backup_count: Rolled-over files to keep.
    """
    handler = _rotating_file(path, max_bytes, backup_count)
    return _attach(handler, level, logging.Formatter(format, date_format))


def enable_json_logging(
    level: LogLevel | int = "INFO",
    path: str | Path | None = None,
) -> logging.Handler:
    """Log checkoutsim records as JSON lines, to stderr or to a rotating file."""
    if path is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        handler = _rotating_file(path, ROTATE_BYTES, ROTATE_KEEP)
    return _attach(handler, level, JsonFormatter())


def configure_from_env() -> None:
    """Apply CHECKOUTSIM_LOGGING / CHECKOUTSIM_LOG_FILE / CHECKOUTSIM_LOG_JSON.

    Does nothing unless a level or a log file is given.
    """
    level = os.environ.get("CHECKOUTSIM_LOGGING", "").strip().upper()
    log_file = os.environ.get("CHECKOUTSIM_LOG_FILE", "").strip()
    as_json = os.environ.get("CHECKOUTSIM_LOG_JSON", "") == "1"

    if not (level or log_file):
        return
    level = level or "INFO"

    if as_json:
        enable_json_logging(level=level, path=log_file or None)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one submodule logger, e.g. ``"core.simulation"``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Drop every handler and silence the package logger."""
    logger = _get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
