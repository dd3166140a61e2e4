"""Logging configuration helpers for the trivia application."""

from __future__ import annotations

import logging
import os
from logging import Logger


def configure_logging(level: str | None = None) -> Logger:
    """Configure basic logging for the application and return the app logger.

    The level defaults to ``TRIVIA_LOG_LEVEL`` from the environment, then INFO.
    """
    level_name = (level or os.getenv("TRIVIA_LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("trivia_app")
