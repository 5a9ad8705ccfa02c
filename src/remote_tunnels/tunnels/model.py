"""Tunnel model: forwarded, published and candidate port mappings."""

import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import ValidationError

from ..common.events import Emitter
from ..common.exceptions import ConfigurationError, TunnelTransportError
from ..common.logging import get_logger
from .config import TunnelModelConfig
from .interfaces import TunnelTransport
from .models import NetworkLocation, Tunnel
from .samples import sample_candidates, sample_forwarded, sample_published
from .transport import NullTransport

logger = get_logger(__name__)

TunnelSource = Mapping[str, Tunnel] | Iterable[Tunnel]


def _index(tunnels: TunnelSource, kind: str) -> dict[str, Tunnel]:
    """Key tunnels by their remote identifier, rejecting duplicates and mismatched keys."""
    if isinstance(tunnels, Mapping):
        for key, tunnel in tunnels.items():
            if key != tunnel.remote:
                raise ConfigurationError(
                    f"{kind} tunnel keyed '{key}' has remote '{tunnel.remote}'"
                )
        values: Iterable[Tunnel] = tunnels.values()
    else:
        values = tunnels

    indexed: dict[str, Tunnel] = {}
    for tunnel in values:
        if tunnel.remote in indexed:
            raise ConfigurationError(f"Duplicate {kind} tunnel '{tunnel.remote}'")
        indexed[tunnel.remote] = tunnel
    return indexed


def _normalize_remote(remote: str) -> str:
    """Key a remote identifier the way Tunnel stores it."""
    return remote.strip() if isinstance(remote, str) else remote


class TunnelModel:
    """Single source of truth for port mappings between a remote host and this machine.

    ``forwarded`` holds tunnels the local user created; they can be renamed
    and closed. ``published`` mirrors ports the remote side already exposes
    and ``candidates`` holds detected listeners that are not forwarded yet.
    Both are read-only here and only change through :meth:`sync_remote`.

    All mutations and their event delivery happen under one re-entrant
    lock, so listeners observe events for a port in the order the changes
    were applied. Unknown identifiers are never an error: mutations become
    no-ops and :meth:`address` returns None.
    """

    def __init__(
        self,
        transport: TunnelTransport | None = None,
        config: TunnelModelConfig | None = None,
        forwarded: TunnelSource | None = None,
        published: TunnelSource | None = None,
        candidates: TunnelSource | None = None,
    ):
        """Initialize tunnel model.

        Args:
            transport: Collaborator that opens the real tunnels (accept-all if None)
            config: Model defaults
            forwarded: Initial user-forwarded tunnels
            published: Initial tunnels exposed by the remote side
            candidates: Initial detected-but-not-forwarded ports

        Raises:
            ConfigurationError: If a seed contains duplicate or mis-keyed tunnels
        """
        self.config = config or TunnelModelConfig()
        self.transport: TunnelTransport = transport or NullTransport()
        self._lock = threading.RLock()

        if self.config.seed_sample_data:
            forwarded = sample_forwarded() if forwarded is None else forwarded
            published = sample_published() if published is None else published
            candidates = sample_candidates() if candidates is None else candidates

        self._forwarded = {
            remote: self._as_forwarded(tunnel)
            for remote, tunnel in _index(forwarded or (), "forwarded").items()
        }
        self._published = _index(published or (), "published")
        self._candidates = _index(candidates or (), "candidate")

        self.on_forward_port: Emitter[Tunnel] = Emitter("port-forwarded")
        self.on_port_name: Emitter[str] = Emitter("port-name-changed")
        self.on_close_port: Emitter[str] = Emitter("port-closed")

        logger.debug(
            "tunnel_model_initialized",
            forwarded=len(self._forwarded),
            published=len(self._published),
            candidates=len(self._candidates),
        )

    @staticmethod
    def _as_forwarded(tunnel: Tunnel) -> Tunnel:
        if tunnel.local is None:
            return tunnel.model_copy(update={"local": tunnel.remote})
        return tunnel

    @property
    def forwarded(self) -> Mapping[str, Tunnel]:
        """Read-only snapshot of user-forwarded tunnels."""
        with self._lock:
            return MappingProxyType(dict(self._forwarded))

    @property
    def published(self) -> Mapping[str, Tunnel]:
        """Read-only snapshot of tunnels published by the remote side."""
        with self._lock:
            return MappingProxyType(dict(self._published))

    @property
    def candidates(self) -> Mapping[str, Tunnel]:
        """Read-only snapshot of detected candidate ports."""
        with self._lock:
            return MappingProxyType(dict(self._candidates))

    def forward(
        self,
        remote: str,
        host: NetworkLocation | str | None = None,
        local: str | None = None,
        name: str | None = None,
    ) -> None:
        """Forward a remote port to a local one.

        Forwarding a port that is already forwarded does nothing. The
        transport must establish the tunnel before the entry is recorded;
        if it fails, nothing is recorded and no event fires.

        Args:
            remote: Remote port identifier
            host: Remote endpoint (config.default_host if None)
            local: Local port identifier (remote if None)
            name: Optional label
        """
        remote = _normalize_remote(remote)
        with self._lock:
            if remote in self._forwarded:
                logger.debug("forward_ignored_already_forwarded", remote=remote)
                return

            tunnel = Tunnel(
                remote=remote,
                host=host if host is not None else self.config.default_host,
                local=local if local is not None else remote,
                name=name,
                closeable=True,
            )

            try:
                self.transport.establish(tunnel.remote, tunnel.host, tunnel.local_or_remote)
            except TunnelTransportError as e:
                logger.warning(
                    "forward_failed", remote=remote, host=str(tunnel.host), error=str(e)
                )
                return

            self._forwarded[tunnel.remote] = tunnel
            logger.info(
                "port_forwarded", remote=tunnel.remote, local=tunnel.local, host=str(tunnel.host)
            )
            self.on_forward_port.fire(tunnel)

    def forward_candidate(self, remote: str) -> None:
        """Forward a detected candidate port using its recorded host, local and name.

        Args:
            remote: Candidate port identifier; unknown candidates are ignored
        """
        remote = _normalize_remote(remote)
        with self._lock:
            candidate = self._candidates.get(remote)
            if candidate is None:
                logger.debug("forward_candidate_ignored_unknown", remote=remote)
                return
            self.forward(
                candidate.remote,
                host=candidate.host,
                local=candidate.local,
                name=candidate.name,
            )

    def name(self, remote: str, name: str | None) -> None:
        """Rename a forwarded tunnel.

        Args:
            remote: Remote port identifier; ignored unless forwarded
            name: New label
        """
        remote = _normalize_remote(remote)
        with self._lock:
            tunnel = self._forwarded.get(remote)
            if tunnel is None:
                logger.debug("rename_ignored_not_forwarded", remote=remote)
                return

            self._forwarded[remote] = tunnel.with_name(name)
            logger.info("port_renamed", remote=remote, name=name)
            self.on_port_name.fire(remote)

    def close(self, remote: str) -> None:
        """Close a forwarded tunnel.

        The entry is removed even if the transport fails to release it.

        Args:
            remote: Remote port identifier; ignored unless forwarded
        """
        remote = _normalize_remote(remote)
        with self._lock:
            if remote not in self._forwarded:
                logger.debug("close_ignored_not_forwarded", remote=remote)
                return

            del self._forwarded[remote]
            try:
                self.transport.release(remote)
            except TunnelTransportError as e:
                logger.error("release_failed", remote=remote, error=str(e))

            logger.info("port_closed", remote=remote)
            self.on_close_port.fire(remote)

    def address(self, remote: str) -> NetworkLocation | None:
        """Resolve a remote port to the local address that reaches it.

        Forwarded tunnels shadow published ones. Candidates are not reachable,
        and neither are tunnels whose local identifier is not a valid port
        (e.g. a composite key such as ``"web app"``).

        Args:
            remote: Remote port identifier

        Returns:
            Local address such as ``http://localhost:3000``, or None
        """
        remote = _normalize_remote(remote)
        with self._lock:
            tunnel = self._forwarded.get(remote)
            if tunnel is None:
                tunnel = self._published.get(remote)

        if tunnel is None:
            return None

        try:
            return NetworkLocation.for_port(
                tunnel.local_or_remote,
                host=self.config.address_host,
                scheme=self.config.address_scheme,
            )
        except ValidationError as e:
            logger.warning(
                "address_unresolvable",
                remote=remote,
                local=tunnel.local_or_remote,
                error=str(e),
            )
            return None

    def sync_remote(
        self,
        published: TunnelSource | None = None,
        candidates: TunnelSource | None = None,
    ) -> None:
        """Replace the published and/or candidate mirrors with the remote side's view.

        Args:
            published: New published tunnels (left unchanged if None)
            candidates: New candidate tunnels (left unchanged if None)

        Raises:
            ConfigurationError: If a source contains duplicate or mis-keyed tunnels
        """
        new_published = _index(published, "published") if published is not None else None
        new_candidates = _index(candidates, "candidate") if candidates is not None else None

        with self._lock:
            if new_published is not None:
                self._published = new_published
            if new_candidates is not None:
                self._candidates = new_candidates

        logger.debug(
            "remote_state_synced",
            published=None if new_published is None else len(new_published),
            candidates=None if new_candidates is None else len(new_candidates),
        )

    def dispose(self) -> None:
        """Drop all event listeners."""
        for emitter in (self.on_forward_port, self.on_port_name, self.on_close_port):
            emitter.clear()
