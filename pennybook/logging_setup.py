"""Logging configuration for pennybook.

- ``configure_logging(level)``: attach a single ``RichHandler`` on stderr to
  the package logger. Called once by the CLI at startup.
- ``get_logger(name)``: acquire a logger, keeping the package logger silent
  with a ``NullHandler`` until the CLI configures it.

Library modules never attach handlers of their own.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

PKG_LOGGER_NAME = "pennybook"
LOG_LEVEL_ENV = "PENNYBOOK_LOG_LEVEL"

_configured = False


def parse_level(level: int | str | None, default: int = logging.WARNING) -> int:
    """Resolve a logging level from an int, a level name or the environment.

    Args:
        level: Level as int or name (e.g., "DEBUG"). If None, uses the
            PENNYBOOK_LOG_LEVEL environment variable when set.
        default: Level used when nothing else resolves.

    Returns:
        Numeric logging level.
    """
    if isinstance(level, int):
        return level
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        numeric = logging.getLevelName(name)
        if isinstance(numeric, int):
            return numeric
    return default


def configure_logging(level: int | str | None = None) -> None:
    """Configure the package logger exactly once.

    Args:
        level: Logging level as int or level name. If None, falls back to
            PENNYBOOK_LOG_LEVEL, then WARNING.
    """
    global _configured
    if _configured:
        return

    logger = logging.getLogger(PKG_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.setLevel(parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until logging is configured."""
    pkg_logger = logging.getLogger(PKG_LOGGER_NAME)
    if not _configured and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
