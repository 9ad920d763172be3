"""Logging setup shared by every hexforge module."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "hexforge"
DEFAULT_LEVEL = "WARNING"

_configured = False


def setup_logging(level: str | int | None = None, verbose: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        level: Explicit level name or number. Falls back to the
            ``HEXFORGE_LOG_LEVEL`` environment variable, then ``WARNING``.
        verbose: Force ``DEBUG`` regardless of ``level``.

    Returns:
        The configured package logger.
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    if verbose:
        level = logging.DEBUG
    elif level is None:
        level = os.getenv("HEXFORGE_LOG_LEVEL", DEFAULT_LEVEL).upper()

    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.handlers = []  # Reset handler
        logger.addHandler(handler)
        _configured = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``hexforge`` namespace."""
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
