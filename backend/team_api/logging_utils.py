"""Helpers for consistent application logging."""

from __future__ import annotations

import logging
import os
import sys
from typing import Final, Optional

LOGGER_NAME: Final[str] = "team_api"
PRIMARY_LEVEL_ENV: Final[str] = "TEAM_API_LOG_LEVEL"
FALLBACK_LEVEL_ENV: Final[str] = "LOG_LEVEL"


def _resolve_log_level() -> int:
    """Return the log level configured via environment variables."""
    raw = os.getenv(PRIMARY_LEVEL_ENV) or os.getenv(FALLBACK_LEVEL_ENV)
    if not raw:
        return logging.INFO

    # Level names only, case-insensitive.
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> logging.Logger:
    """Ensure application logs flow to stdout with sane defaults."""
    logger = logging.getLogger(LOGGER_NAME)
    level = _resolve_log_level()

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s [%(name)s] %(message)s",
                "%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.propagate = False

    for handler in logger.handlers:
        handler.setLevel(level)

    logger.setLevel(level)
    return logger


def get_logger(child: Optional[str] = None) -> logging.Logger:
    """Return a configured logger, optionally for a named child."""
    base = configure_logging()
    return base.getChild(child) if child else base
