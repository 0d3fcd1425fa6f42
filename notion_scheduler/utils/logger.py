# File: notion_scheduler/utils/logger.py
"""
Centralized logging configuration for the Notion week scheduler.
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Union

ROOT_LOGGER_NAME = "notion_scheduler"
LOG_DIR = Path("logs")


def _configure_root(level: int) -> logging.Logger:
    """Attach console and file handlers to the package logger once."""
    root = logging.getLogger(ROOT_LOGGER_NAME)

    # Prevent duplicate handlers
    if root.handlers:
        return root

    root.setLevel(logging.DEBUG)
    root.propagate = False

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(console_format)

    # File handlers for persistent logs
    LOG_DIR.mkdir(exist_ok=True)

    file_format = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    log_file = LOG_DIR / f"notion_scheduler_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_format)

    # Errors only, kept across days
    error_handler = logging.FileHandler(LOG_DIR / "errors.log", encoding='utf-8')
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(file_format)

    root.addHandler(console_handler)
    root.addHandler(file_handler)
    root.addHandler(error_handler)

    return root


def setup_logger(name: str = ROOT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """
    Configure and return a logger instance.

    All project loggers are children of the ``notion_scheduler`` logger,
    which owns the handlers.

    Args:
        name: Logger name (usually ``__name__``)
        level: Logging level used the first time the handlers are created

    Returns:
        Configured logger instance
    """
    _configure_root(level)

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def set_log_level(level: Union[int, str]) -> None:
    """Apply a verbosity level (``"DEBUG"``, ``logging.INFO``...) to the console output."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    root = _configure_root(level)

    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            continue
        handler.setLevel(level)


class LoggerMixin:
    """Mixin to add logging capability to any class."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")
        return self._logger
