"""
Structured logging configuration using structlog.

The health API emits three events of its own, all with ``service`` bound:

- ``listening`` (``address``) once the socket is bound;
- ``bind_failed`` (``host``, ``port``, ``error``) before a bind error propagates;
- ``database_probe_failed`` (``error_type``) for each failed readiness check.

uvicorn and SQLAlchemy log through the standard library handler set up here.
"""

import logging
import sys

import structlog


def setup_logging(service_name: str, log_level: str = "INFO") -> None:
    """Configure structured logging for the service.

    Args:
        service_name: Bound to every event as ``service``.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR). DEBUG switches
            to the human-readable console renderer, anything else emits JSON.
    """
    level = getattr(logging, log_level.upper())

    # uvicorn and sqlalchemy log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if level == logging.DEBUG
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(service=service_name)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger bound to ``name`` (typically the module name)."""
    return structlog.get_logger(name)
