"""Tunnel domain: models, configuration, transports and the tunnel model."""

from .config import LoopbackTransportConfig, TunnelModelConfig
from .interfaces import TunnelTransport
from .model import TunnelModel
from .models import DEFAULT_HOST, NetworkLocation, Tunnel
from .transport import LoopbackTransport, NullTransport

__all__ = [
    # Models
    "NetworkLocation",
    "Tunnel",
    "DEFAULT_HOST",
    "TunnelModelConfig",
    "LoopbackTransportConfig",
    # Model
    "TunnelModel",
    # Transports
    "TunnelTransport",
    "NullTransport",
    "LoopbackTransport",
]
