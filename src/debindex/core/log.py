#!/usr/bin/env python3
"""Logging setup for debindex (stdlib `logging`, one logger per module)."""

import logging
from typing import Union

LOGGER_NAME = "debindex"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """
    Attach a single stream handler to the `debindex` logger and set its level.

    Calling it again only updates the level.

    Raises:
        ValueError: if `level` is not a known logging level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved

    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(h, "_debindex", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._debindex = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
