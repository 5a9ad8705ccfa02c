"""Common utilities and shared functionality."""

from .events import Emitter, Subscription
from .exceptions import (
    ConfigurationError,
    RemoteTunnelsError,
    TunnelError,
    TunnelTransportError,
)
from .logging import get_logger, setup_logging
from .utils import (
    MAX_PORT,
    MIN_PORT,
    parse_port,
    validate_non_empty_string,
    validate_port,
)

__all__ = [
    # Events
    "Emitter",
    "Subscription",
    # Exceptions
    "RemoteTunnelsError",
    "ConfigurationError",
    "TunnelError",
    "TunnelTransportError",
    # Logging
    "get_logger",
    "setup_logging",
    # Utils
    "validate_port",
    "validate_non_empty_string",
    "parse_port",
    "MIN_PORT",
    "MAX_PORT",
]
