"""Application-wide logging to a rotating file in platformdirs user_log_dir.

Components ask for a child logger (``get_logger("store")``) so every line
carries the part of the app that wrote it.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "smart_todo"
_LOG_FILE = "smart_todo.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None
_handler: logging.Handler | None = None


def _file_handler() -> logging.Handler:
    global _handler
    if _handler is not None:
        return _handler

    log_dir = Path(user_log_dir(_APP_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_dir / _LOG_FILE,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    _handler = handler
    return _handler


def _app_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.INFO)
    # The logger may already carry handlers that are not ours
    handler = _file_handler()
    if handler not in logger.handlers:
        logger.addHandler(handler)
    # Textual owns the terminal; never echo to stderr
    logger.propagate = False

    _logger = logger
    return _logger


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the app logger, or its child for *component*."""
    logger = _app_logger()
    return logger.getChild(component) if component else logger


def set_level(level: str | int) -> None:
    """Change the app log level, e.g. from the ``logging.level`` setting."""
    if isinstance(level, str):
        level = level.upper()
    _app_logger().setLevel(level)
