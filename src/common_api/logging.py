"""Logging configuration for the common API client."""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: str | int = logging.INFO, *, json: bool = False) -> None:
    """Configure stdlib logging and route structlog through it."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: object) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name`` and ``initial_values``."""
    return structlog.get_logger(name).bind(**initial_values)
