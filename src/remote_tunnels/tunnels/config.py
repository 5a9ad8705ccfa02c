"""Tunnel model configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import DEFAULT_HOST, NetworkLocation


class TunnelModelConfig(BaseModel):
    """Defaults applied by the tunnel model when callers omit optional values."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    default_host: NetworkLocation = Field(
        default=DEFAULT_HOST,
        description="Remote location used when forward() is called without a host",
    )
    address_scheme: str = Field(
        default="http", min_length=1, description="Scheme of resolved local addresses"
    )
    address_host: str = Field(
        default="localhost", min_length=1, description="Host of resolved local addresses"
    )
    seed_sample_data: bool = Field(
        default=False, description="Populate the mappings with illustrative sample tunnels"
    )

    @field_validator("default_host", mode="before")
    @classmethod
    def parse_default_host(cls, v: Any) -> Any:
        if isinstance(v, str):
            return NetworkLocation.parse(v)
        return v

    @field_validator("address_host")
    @classmethod
    def validate_address_host(cls, v: str) -> str:
        """Validate hostname format."""
        if not v.replace(".", "").replace("-", "").replace("_", "").isalnum():
            raise ValueError(
                "Hostname must contain only alphanumeric characters, dots, hyphens, and underscores"
            )
        return v


class LoopbackTransportConfig(BaseModel):
    """Settings for probing the local side of a tunnel."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    address_host: str = Field(
        default="localhost", min_length=1, description="Host the local side listens on"
    )
    connect_timeout: float = Field(
        default=1.0, ge=0.1, le=60.0, description="TCP probe timeout in seconds"
    )
