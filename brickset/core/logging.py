"""Centralized logging configuration.

Modules obtain loggers with ``get_logger(__name__)``. Only entry points call
``configure_logging``; importing the library never installs handlers.
"""
from __future__ import annotations

import logging
import sys
from typing import Union

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_PACKAGE_LOGGER = "brickset"
_initialized = False


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Attach a single stderr handler to the package logger and set its level."""
    global _initialized
    root = logging.getLogger(_PACKAGE_LOGGER)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
