"""
Centralized logging configuration for the container utilities.

Uses structlog on top of the standard library logging module. The library
itself only emits DEBUG records (shape resolution, lookup misses) and
WARNING records (rejected insertions), so nothing is printed under the
default WARNING level unless a caller misuses a container.
"""
import logging
import sys
from typing import Any

import structlog

logging.getLogger("container_utils").addHandler(logging.NullHandler())


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for the whole library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )
    logging.getLogger("container_utils").setLevel(log_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **initial_values: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger wrapping the stdlib logger ``name``.

    Records are filtered by the stdlib logger level, so nothing is emitted
    until the application configures logging.

    Args:
        name: Logger name (typically __name__)
        initial_values: Context bound to every record

    Returns:
        Lazily configured structlog logger instance
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )


def get_lookup_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger bound with lookup context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the lookup subsystem
    """
    return get_logger(name, subsystem="lookup")
