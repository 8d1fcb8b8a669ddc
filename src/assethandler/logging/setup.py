"""Logging setup helpers."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assethandler.config import LoggingSettings

LOGGER_NAME = "assethandler"
LOG_FILENAME = f"{LOGGER_NAME}.log"
LOG_FORMAT = "%(asctime)s %(levelname).1s %(name)s %(message)s"
MAX_BYTES = 2 * 1024 * 1024
BACKUP_COUNT = 5


def configure_logging(
    log_path: Path | None = None,
    level: str = "INFO",
    mirror_to_console: bool = True,
) -> logging.Logger:
    """Configure the ``assethandler`` logger.

    The registry is usually embedded in a host application, so a log file is only
    written when ``log_path`` is given. Console output goes to stderr to keep
    rendered markup on stdout clean.
    """

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = False

    numeric_level = _normalize_level(level)
    logger.setLevel(numeric_level)
    formatter = logging.Formatter(LOG_FORMAT)

    if log_path is not None:
        file_path = _resolve_log_path(log_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if mirror_to_console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(numeric_level)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def configure_from_settings(
    settings: LoggingSettings,
    *,
    level_override: str | None = None,
    path_override: Path | None = None,
    mirror_to_console: bool = False,
) -> logging.Logger:
    """Configure logging from the ``logging`` section of the configuration."""

    return configure_logging(
        log_path=path_override or settings.path,
        level=level_override or settings.level,
        mirror_to_console=mirror_to_console,
    )


def _normalize_level(level: str) -> int:
    """Convert log level strings to logging constants."""

    candidate = level.strip().upper()
    if candidate == "WARN":
        candidate = "WARNING"
    numeric = getattr(logging, candidate, None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unsupported log level: {level!r}")
    return numeric


def _resolve_log_path(log_path: Path) -> Path:
    """Resolve a log file or directory relative to the working directory."""

    candidate = log_path if log_path.is_absolute() else Path.cwd() / log_path
    if candidate.is_dir() or candidate.suffix == "":
        return candidate / LOG_FILENAME
    return candidate
