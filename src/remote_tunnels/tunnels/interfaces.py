"""Protocol interfaces for collaborators of the tunnel model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .models import NetworkLocation


@runtime_checkable
class TunnelTransport(Protocol):
    """Opens and tears down the network tunnel behind a forwarded port."""

    def establish(self, remote: str, host: NetworkLocation, local: str) -> None:
        """Open a tunnel from ``host``'s ``remote`` port to ``local``.

        Raises:
            TunnelTransportError: If the tunnel cannot be established
        """
        ...

    def release(self, remote: str) -> None:
        """Tear down the tunnel for ``remote``.

        Raises:
            TunnelTransportError: If the tunnel cannot be released
        """
        ...
