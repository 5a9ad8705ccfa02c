"""Built-in tunnel transports."""

import logging
import socket

from ..common.exceptions import TunnelTransportError
from ..common.utils import parse_port
from .config import LoopbackTransportConfig
from .models import NetworkLocation

logger = logging.getLogger(__name__)


class NullTransport:
    """Transport that records nothing and accepts every tunnel."""

    def establish(self, remote: str, host: NetworkLocation, local: str) -> None:
        logger.debug(f"Accepting tunnel {host}/{remote} -> {local} without transport")

    def release(self, remote: str) -> None:
        logger.debug(f"Releasing tunnel {remote} without transport")


class LoopbackTransport:
    """Transport that only accepts tunnels whose local port is already listening.

    Useful when something else (an SSH session, a port-forwarding agent) owns
    the actual tunnel and the model should only reflect working mappings.
    """

    def __init__(self, config: LoopbackTransportConfig | None = None):
        """Initialize loopback transport.

        Args:
            config: Probe settings (localhost with a one second timeout if None)
        """
        self.config = config or LoopbackTransportConfig()

    def establish(self, remote: str, host: NetworkLocation, local: str) -> None:
        """Probe ``address_host:local`` with a TCP connect.

        Raises:
            TunnelTransportError: If local is not a port or nothing listens on it
        """
        try:
            port = parse_port(local, "Local port")
        except ValueError as e:
            raise TunnelTransportError(str(e), remote=remote) from e

        try:
            with socket.create_connection(
                (self.config.address_host, port), timeout=self.config.connect_timeout
            ):
                pass
        except OSError as e:
            raise TunnelTransportError(
                f"Nothing listening on {self.config.address_host}:{port} for remote port {remote}: {e}",
                remote=remote,
            ) from e

        logger.debug(f"Local port {port} reachable for {host}/{remote}")

    def release(self, remote: str) -> None:
        logger.debug(f"Loopback tunnel {remote} released")
