"""
utils/logger.py
---------------
Logging setup shared by the db layer and the entry point.
Modules call `get_logger(__name__)`; the root logger is configured on the
first call, at the level named by LOG_LEVEL in the environment.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_handler: logging.Handler | None = None


def resolve_level(name: str) -> int:
    """
    Turn a LOG_LEVEL value ("DEBUG", "warning", "10") into a logging level.
    Unknown names fall back to INFO.
    """
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _init_logging(level_name: str = LOG_LEVEL) -> None:
    """Attach one stdout handler to the root logger."""
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(resolve_level(level_name))
    root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger, configuring logging on first use.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    _init_logging()
    return logging.getLogger(name)
