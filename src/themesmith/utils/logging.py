"""Logging configuration derived from :class:`~themesmith.services.settings.Settings`.

Logs go to ``themesmith.log`` beside the key-value store (``<store dir>/logs``)
unless ``THEMESMITH_LOG_DIR`` or an explicit directory says otherwise. Debug
settings raise the level to DEBUG and mirror records to stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - imports for type checking only
    from ..services.settings import Settings

__all__ = ["LOG_FILE_NAME", "configure_logging", "resolve_log_path"]

LOG_FILE_NAME = "themesmith.log"
_LOG_DIR_ENV = "THEMESMITH_LOG_DIR"
_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def resolve_log_path(settings: Settings, log_dir: Path | str | None = None) -> Path:
    """Pick the log file: explicit directory, then environment, then next to the store."""

    directory = log_dir or os.environ.get(_LOG_DIR_ENV) or Path(settings.store_path).parent / "logs"
    return Path(directory).expanduser() / LOG_FILE_NAME


def configure_logging(
    settings: Settings,
    *,
    log_dir: Path | str | None = None,
    max_bytes: int = 512_000,
    backup_count: int = 2,
) -> Path:
    """Replace the root handlers according to ``settings`` and return the log file path."""

    level = logging.DEBUG if settings.debug_logging else logging.WARNING
    log_path = resolve_log_path(settings, log_dir)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler = logging.handlers.RotatingFileHandler(
        log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [file_handler]
    if settings.debug_logging:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.captureWarnings(True)
    return log_path
