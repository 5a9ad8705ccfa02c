"""Tunnel value models using Pydantic for type safety and validation."""

import re
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.utils import validate_non_empty_string

_SCHEME_PATTERN = re.compile(r"^[a-z][a-z0-9+.\-]*$")


class NetworkLocation(BaseModel):
    """Scheme plus authority of a network endpoint, e.g. ``http://localhost:3000``."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    scheme: str = Field(min_length=1, description="URI scheme such as http")
    authority: str = Field(min_length=1, description="host[:port] part")

    @field_validator("scheme")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        """Normalize scheme to lower case and check its characters."""
        v = v.lower()
        if not _SCHEME_PATTERN.match(v):
            raise ValueError(f"Invalid scheme '{v}'")
        return v

    @field_validator("authority")
    @classmethod
    def validate_authority(cls, v: str) -> str:
        """Reject authorities carrying a path or whitespace."""
        if "/" in v or any(ch.isspace() for ch in v):
            raise ValueError(f"Invalid authority '{v}'")
        return v

    @classmethod
    def parse(cls, value: str) -> "NetworkLocation":
        """Parse ``scheme://authority[/path]``; any path, query or fragment is dropped.

        Args:
            value: Location string

        Returns:
            Parsed location

        Raises:
            ValueError: If the string has no scheme or no authority
        """
        text = validate_non_empty_string(value, "Network location")
        if "://" not in text:
            raise ValueError(f"Network location must look like scheme://host, got '{value}'")

        parts = urlsplit(text)
        if not parts.netloc:
            raise ValueError(f"Network location '{value}' has no authority")

        return cls(scheme=parts.scheme, authority=parts.netloc)

    @classmethod
    def for_port(cls, port: str, host: str = "localhost", scheme: str = "http") -> "NetworkLocation":
        """Build a location pointing at ``port`` on ``host``."""
        return cls(scheme=scheme, authority=f"{host}:{port}")

    @property
    def host(self) -> str:
        """Hostname without the port (IPv6 brackets kept)."""
        if self.authority.startswith("["):
            return self.authority[: self.authority.index("]") + 1]
        host, sep, port = self.authority.rpartition(":")
        if sep and port.isdigit():
            return host
        return self.authority

    @property
    def port(self) -> int | None:
        """Port number, or None when the authority has no port."""
        tail = self.authority[len(self.host):]
        if tail.startswith(":") and tail[1:].isdigit():
            return int(tail[1:])
        return None

    def __str__(self) -> str:
        return f"{self.scheme}://{self.authority}"


DEFAULT_HOST = NetworkLocation(scheme="http", authority="fakeHost")


class Tunnel(BaseModel):
    """A remote port and the local address it maps to (immutable value record)."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")

    remote: str = Field(description="Port identifier on the remote host")
    host: NetworkLocation = Field(description="Network location of the remote endpoint")
    local: str | None = Field(default=None, description="Local port the remote is mapped to")
    name: str | None = Field(default=None, description="User-facing label")
    description: str | None = Field(default=None, description="Free-text annotation")
    closeable: bool | None = Field(
        default=None, description="Whether the user may tear the tunnel down"
    )

    @field_validator("remote")
    @classmethod
    def validate_remote(cls, v: str) -> str:
        return validate_non_empty_string(v, "Remote port")

    @field_validator("host", mode="before")
    @classmethod
    def parse_host(cls, v: Any) -> Any:
        """Accept location strings as well as NetworkLocation values."""
        if isinstance(v, str):
            return NetworkLocation.parse(v)
        return v

    def with_name(self, name: str | None) -> "Tunnel":
        """Create new tunnel instance with updated name (immutable pattern).

        Args:
            name: New label, or None to clear it

        Returns:
            New tunnel instance with updated name
        """
        return self.model_copy(update={"name": name})

    @property
    def local_or_remote(self) -> str:
        """Local identifier, falling back to the remote identifier."""
        return self.local if self.local is not None else self.remote
