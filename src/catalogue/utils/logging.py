"""Logging helpers shared by every catalogue module."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger (configure once via configure_logging)."""
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root ``catalogue`` logger.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR)

    Raises:
        ValueError: If the level name is unknown
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger("catalogue")
    root.setLevel(numeric)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
