"""Logging setup for applications embedding taproom.

The library only ever logs through ``logging.getLogger(__name__)`` loggers
below the ``taproom`` package logger; it never touches the root logger.
"""

from __future__ import annotations

import logging

from taproom.config.settings import TaproomSettings

PACKAGE_LOGGER = "taproom"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TaproomHandler(logging.StreamHandler):
    """Stream handler added by configure_logging(); at most one per logger."""

    pass


def configure_logging(settings: TaproomSettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and attach a handler.

    Calling this more than once only updates the level; a second handler is
    never added.

    Args:
        settings: Settings to read the level from. Loaded from the
            environment when omitted.

    Returns:
        The ``taproom`` package logger.
    """
    settings = settings or TaproomSettings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)

    if not any(isinstance(h, TaproomHandler) for h in logger.handlers):
        handler = TaproomHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
