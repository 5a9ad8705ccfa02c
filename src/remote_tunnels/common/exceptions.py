"""Custom exceptions for remote tunnels."""


class RemoteTunnelsError(Exception):
    """Base exception for all remote tunnel errors."""
    pass


class ConfigurationError(RemoteTunnelsError):
    """Raised when configuration is invalid."""
    pass


class TunnelError(RemoteTunnelsError):
    """Base exception for tunnel operations."""
    pass


class TunnelTransportError(TunnelError):
    """Raised by a transport when a tunnel cannot be established or released."""

    def __init__(self, message: str, remote: str | None = None):
        super().__init__(message)
        self.remote = remote
