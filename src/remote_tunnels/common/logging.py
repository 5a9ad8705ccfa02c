"""Structured logging setup for remote tunnels using structlog."""

import logging
import sys

import structlog
from structlog.typing import Processor

PACKAGE_LOGGER = "remote_tunnels"

_CONSOLE_FORMAT = "%(message)s"
_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_processors(json_format: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    processors.append(
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer()
    )
    return processors


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
    logger_name: str = PACKAGE_LOGGER,
) -> logging.Logger:
    """Configure structured logging for the tunnel model and its services.

    Only the ``remote_tunnels`` logger hierarchy is touched unless another
    ``logger_name`` is given (pass ``""`` to configure the root logger).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, render structlog events as JSON
        log_file: Optional file path to also write logs to
        logger_name: Name of the stdlib logger to attach handlers to

    Returns:
        The configured stdlib logger

    Raises:
        ValueError: If level is not a known logging level name
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    target = logging.getLogger(logger_name or None)
    target.handlers = []
    target.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    target.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        target.addHandler(file_handler)

    if logger_name:
        target.propagate = False

    structlog.configure(
        processors=_build_processors(json_format),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    return target


def get_logger(name: str, **context: object) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, optionally pre-bound with context values.

    Args:
        name: Logger name (usually __name__)
        **context: Key/value pairs bound to every event from this logger

    Returns:
        Configured structlog logger
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
