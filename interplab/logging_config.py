"""Logging setup for interplab.

The library logs through the ``interplab`` logger hierarchy and is silent
until a handler is attached. Solvers report failed attempts at DEBUG,
experiments summarise runs at INFO/DEBUG, and closed-form solutions warn
when evaluated outside their valid regime.

Example usage:
    import interplab

    interplab.enable_console_logging(level="DEBUG")
    interplab.set_module_level("numerics.root_finding", "WARNING")

    # Or drive everything from the environment
    interplab.configure_from_env()

Environment variables:
    IL_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    IL_LOG_FILE: Path to log file (enables rotating file logging)
    IL_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "enable_timed_file_logging",
    "set_level",
    "set_module_level",
    "trace_solvers",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "interplab"

# Modules that report individual solver attempts at DEBUG
SOLVER_MODULES = (
    "numerics.root_finding",
    "splines.cubic_hermite",
    "interpolation.second_order_dynamics",
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Example output:
        {"timestamp": "2026-01-15T10:30:00.123456+00:00", "level": "DEBUG",
         "logger": "interplab.numerics.root_finding", "function": "newton_raphson",
         "message": "newton_raphson: derivative 1.2e-09 near zero at y=0.5"}
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "function": record.funcName,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _get_level(level: str | int) -> int:
    """Convert a level name or number to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close every handler on the library logger except NullHandlers."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def _attach(handler: logging.Handler, level: LogLevel | int, formatter: logging.Formatter) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _log_path(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Log to stderr.

    Args:
        level: Log level name or number.
        format: Record format string.
        date_format: Format for %(asctime)s.

    Returns:
        The attached StreamHandler.
    """
    handler = logging.StreamHandler()
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Log to a size-rotated file, creating parent directories as needed.

    Args:
        path: Log file path.
        level: Log level name or number.
        max_bytes: Size at which the file is rotated.
        backup_count: Rotated files to keep.
        format: Record format string.
        date_format: Format for %(asctime)s.

    Returns:
        The attached RotatingFileHandler.
    """
    handler = RotatingFileHandler(_log_path(path), maxBytes=max_bytes, backupCount=backup_count)
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_timed_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    when: str = "midnight",
    interval: int = 1,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> TimedRotatingFileHandler:
    """Log to a file rotated on a schedule (see TimedRotatingFileHandler ``when``)."""
    handler = TimedRotatingFileHandler(
        _log_path(path), when=when, interval=interval, backupCount=backup_count
    )
    _attach(handler, level, logging.Formatter(format, date_format))
    return handler


def enable_json_logging(level: LogLevel | int = "INFO") -> logging.StreamHandler:
    """Log JSON records to stderr."""
    handler = logging.StreamHandler()
    _attach(handler, level, JsonFormatter())
    return handler


def enable_json_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> RotatingFileHandler:
    """Log JSON records to a size-rotated file."""
    handler = RotatingFileHandler(_log_path(path), maxBytes=max_bytes, backupCount=backup_count)
    _attach(handler, level, JsonFormatter())
    return handler


def configure_from_env() -> None:
    """Configure logging from IL_LOGGING, IL_LOG_FILE and IL_LOG_JSON.

    Does nothing when neither IL_LOGGING nor IL_LOG_FILE is set.
    """
    level = os.environ.get("IL_LOGGING", "").upper()
    log_file = os.environ.get("IL_LOG_FILE", "")
    use_json = os.environ.get("IL_LOG_JSON", "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if use_json:
        if log_file:
            enable_json_file_logging(log_file, level=level)
        else:
            enable_json_logging(level=level)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the library logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level of one submodule's logger.

    Args:
        module: Module path relative to interplab, e.g. "splines.cubic_hermite".
        level: Log level name or number.
    """
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def trace_solvers(level: LogLevel | int = "DEBUG") -> None:
    """Show per-attempt solver output without the rest of the library's DEBUG.

    Lowers only the root finding, Hermite search and dynamics loggers, so a
    handler at DEBUG with the library logger at WARNING reports failed
    iterations, seed retries and retunes but not experiment progress.

    Args:
        level: Level for the solver module loggers.
    """
    for module in SOLVER_MODULES:
        set_module_level(module, level)


def disable_logging() -> None:
    """Remove all handlers and silence the library logger."""
    logger = _get_logger()
    _clear_handlers()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
