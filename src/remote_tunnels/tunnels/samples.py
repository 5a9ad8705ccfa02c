"""Illustrative tunnels used to seed a model for demos and UI development."""

from .models import DEFAULT_HOST, Tunnel


def sample_forwarded() -> dict[str, Tunnel]:
    return {
        "3000": Tunnel(
            remote="3000",
            local="3000",
            description="one description",
            closeable=True,
            host=DEFAULT_HOST,
        ),
        "4000": Tunnel(
            remote="4000",
            local="4001",
            name="Process Port",
            closeable=True,
            host=DEFAULT_HOST,
        ),
    }


def sample_published() -> dict[str, Tunnel]:
    return {
        "3500": Tunnel(
            remote="3500",
            local="3500",
            name="My App",
            description="one description",
            host=DEFAULT_HOST,
        ),
        "4500": Tunnel(
            remote="4500",
            local="4501",
            description="two description",
            host=DEFAULT_HOST,
        ),
    }


def sample_candidates() -> dict[str, Tunnel]:
    return {
        "5000": Tunnel(remote="5000", description="node.js /anArg", host=DEFAULT_HOST),
        "5500": Tunnel(remote="5500", host=DEFAULT_HOST),
    }
