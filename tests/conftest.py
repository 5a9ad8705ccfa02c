"""Shared pytest fixtures for remote tunnels tests."""

from unittest.mock import Mock

import pytest

from remote_tunnels.tunnels import NetworkLocation, TunnelModel


class EventRecorder:
    """Collects payloads from every tunnel model event channel."""

    def __init__(self, model: TunnelModel):
        self.forwarded: list = []
        self.renamed: list = []
        self.closed: list = []
        self.order: list[tuple[str, str]] = []
        model.on_forward_port.subscribe(self._on_forward)
        model.on_port_name.subscribe(self._on_name)
        model.on_close_port.subscribe(self._on_close)

    def _on_forward(self, tunnel) -> None:
        self.forwarded.append(tunnel)
        self.order.append(("forwarded", tunnel.remote))

    def _on_name(self, remote: str) -> None:
        self.renamed.append(remote)
        self.order.append(("renamed", remote))

    def _on_close(self, remote: str) -> None:
        self.closed.append(remote)
        self.order.append(("closed", remote))


@pytest.fixture
def mock_transport():
    """Create a mock transport that accepts every tunnel.

    Returns:
        Mock: Transport with establish/release methods
    """
    transport = Mock()
    transport.establish.return_value = None
    transport.release.return_value = None
    return transport


@pytest.fixture
def remote_host():
    """Remote endpoint used across tests."""
    return NetworkLocation.parse("http://devbox.example.com")


@pytest.fixture
def model(mock_transport):
    """Create an empty tunnel model backed by the mock transport."""
    return TunnelModel(transport=mock_transport)


@pytest.fixture
def events(model):
    """Record every event fired by the model fixture."""
    return EventRecorder(model)
