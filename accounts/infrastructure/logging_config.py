"""structlog setup."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with ISO timestamps and console rendering.

    Args:
        level: Minimum level name (e.g. "DEBUG", "INFO"); unknown names fall back to INFO
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
    )
