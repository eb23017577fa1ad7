"""Logging helpers: namespaced loggers and a one-time console setup."""

from __future__ import annotations

import logging

_ROOT = "mdconv"


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger under the `mdconv.` namespace."""
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only updates the level; handlers are installed once.
    """
    logger = logging.getLogger(_ROOT)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger
