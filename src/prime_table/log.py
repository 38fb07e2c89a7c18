"""Structured logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def configure_logging(level: str = "WARNING", json: bool = False) -> None:
    """Configure structlog to write events at ``level`` and above to stderr.

    Args:
        level: Standard logging level name.
        json: Render events as JSON lines instead of key=value text.

    Raises:
        ValueError: If the level name is unknown.
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        raise ValueError(f"Unknown log level: {level!r}")

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None):
    """Return a structlog logger.

    Configuration is left to the application, see :func:`configure_logging`.
    """
    return structlog.get_logger(name)
