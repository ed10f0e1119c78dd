"""Logger setup. Diagnostics never share stdout with the operator prompts."""

from __future__ import annotations

import logging
import os

from rich.console import Console

from hotdog_pos.config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV, LOG_PATH_ENV

_ROOT_LOGGER_NAME = "hotdog_pos"


def _disable_logging(logger: logging.Logger, reason: str) -> logging.Logger:
    # Logging must never interfere with the register.
    Console(stderr=True, highlight=False).print(f"Logging disabled: {reason}", style="yellow", markup=False)
    logger.addHandler(logging.NullHandler())
    return logger


def configure_logging() -> logging.Logger:
    """
    Attach a handler to the package logger.

    Resolution order:
    1. HOTDOG_POS_LOG_PATH set: append to that file at HOTDOG_POS_LOG_LEVEL
    2. Otherwise: NullHandler

    A bad level or an unwritable path falls back to NullHandler with a
    single notice on stderr.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    # Avoid stacking handlers when called more than once.
    if logger.handlers:
        return logger

    log_path = os.environ.get(LOG_PATH_ENV, "").strip()
    if not log_path:
        logger.addHandler(logging.NullHandler())
        return logger

    level_name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        return _disable_logging(logger, f"unknown log level in {LOG_LEVEL_ENV}: {level_name!r}")

    try:
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        return _disable_logging(logger, f"cannot open {log_path}: {exc}")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
