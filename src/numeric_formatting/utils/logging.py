"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", json_logs: bool = True):
    """Configure structlog for the process.

    Library code only logs when the currency table is loaded, so this is meant
    to be called once by the host (or a script) before the first format call.
    ``json_logs=False`` switches to the human-readable console renderer.
    """
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
    )


def get_logger(component: str) -> structlog.BoundLogger:
    """Return a logger with *component* bound to every event it emits."""
    return structlog.get_logger(component, component=component)
