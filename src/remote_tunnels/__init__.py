"""Remote Tunnels - port forwarding state for remote development hosts."""

from . import explorer, tunnels
from .common.events import Emitter, Subscription
from .common.exceptions import (
    ConfigurationError,
    RemoteTunnelsError,
    TunnelError,
    TunnelTransportError,
)
from .common.logging import get_logger, setup_logging
from .explorer import (
    HelpContribution,
    HelpInformation,
    InMemoryPreferenceStore,
    PreferenceStore,
    RemoteExplorerService,
    StorageScope,
)
from .tunnels import (
    DEFAULT_HOST,
    LoopbackTransport,
    LoopbackTransportConfig,
    NetworkLocation,
    NullTransport,
    Tunnel,
    TunnelModel,
    TunnelModelConfig,
    TunnelTransport,
)

# Setup logging on package initialization
setup_logging(level="INFO")

# Package level logger
logger = get_logger(__name__)

__version__ = "0.1.0"


__all__ = [
    # Tunnel model
    "TunnelModel",
    "TunnelModelConfig",
    "LoopbackTransportConfig",
    "Tunnel",
    "NetworkLocation",
    "DEFAULT_HOST",
    # Transports
    "TunnelTransport",
    "NullTransport",
    "LoopbackTransport",
    # Explorer
    "RemoteExplorerService",
    "HelpContribution",
    "HelpInformation",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "StorageScope",
    # Events
    "Emitter",
    "Subscription",
    # Exceptions
    "RemoteTunnelsError",
    "ConfigurationError",
    "TunnelError",
    "TunnelTransportError",
    # Utilities
    "get_logger",
    "setup_logging",
    "explorer",
    "tunnels",
]
