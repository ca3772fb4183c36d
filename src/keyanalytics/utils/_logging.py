"""
Structured logging configuration using structlog.

Library modules obtain loggers through `get_logger(__name__)` and never
configure output themselves. Applications (or tests) call
`configure_logging` once to choose the level and renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Configure structured logging for KeyAnalytics.

    Parameters
    ----------
    level : str
        Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_output : bool
        If True, render events as JSON lines instead of console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[structlog.types.Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to `name`."""
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> Any:
    """
    Bind key-value pairs to every log event emitted inside the block.

    Example
    -------
        with log_context(algorithm="zscore"):
            batch.compute()
    """
    return structlog.contextvars.bound_contextvars(**kwargs)
