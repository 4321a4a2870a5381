"""Logging configuration for daycal.

Events are snake_case names with keyword context: convention_fallback and
calendar_created at debug level from construction, and dates_shifted,
active_mask_computed and days_between_computed from the series helpers.
Day arithmetic itself never logs.
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

import structlog


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, normally with the calling module's __name__."""
    return structlog.get_logger(name)


def configure_logging(
    level: str = "WARNING",
    json_output: bool = False,
) -> None:
    """Configure structlog output for daycal events.

    Construction events are emitted at debug level, so pass level="DEBUG" to
    see convention fallbacks.

    Args:
        level: Log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_output: True for JSON output (production), False for console
    """
    numeric_level = getattr(logging, level.upper())
    logging.basicConfig(format="%(message)s", level=numeric_level)

    shared_processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors = shared_processors + [structlog.processors.JSONRenderer()]
    else:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@contextmanager
def timed_block(
    logger: structlog.BoundLogger,
    event: str,
    level: str = "debug",
    **context: object,
) -> Generator[None, None, None]:
    """Log event with elapsed_ms and context once the block exits.

    Used around the series helpers, e.g. ``dates_shifted`` with the row count
    and shift periods. The event is logged even when the block raises.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        getattr(logger, level)(event, elapsed_ms=round(elapsed_ms, 2), **context)
