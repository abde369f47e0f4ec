"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from updater.config import settings

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(debug: bool = False) -> None:
    """Configure the root logger.

    ``--debug`` wins over ``settings.log_level``; an unknown level name falls
    back to INFO.
    """
    if debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(level=level, format=DEFAULT_LOG_FORMAT)
    # basicConfig is a no-op once handlers exist (e.g. under pytest)
    logging.getLogger().setLevel(level)
