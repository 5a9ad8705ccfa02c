"""Remote explorer service owning the tunnel model and explorer preferences."""

from collections.abc import Iterable

from ..common.events import Emitter
from ..common.logging import get_logger
from ..tunnels.config import TunnelModelConfig
from ..tunnels.interfaces import TunnelTransport
from ..tunnels.model import TunnelModel
from .models import HelpContribution, HelpInformation
from .storage import PreferenceStore, StorageScope

logger = get_logger(__name__)

REMOTE_EXPLORER_TYPE_KEY = "remote.explorerType"


class RemoteExplorerService:
    """Entry point for the remote explorer.

    Holds the selected remote target type (persisted in both workspace and
    global scope), the help links contributed by extensions, and the
    :class:`TunnelModel` for the current remote.
    """

    def __init__(
        self,
        store: PreferenceStore,
        transport: TunnelTransport | None = None,
        config: TunnelModelConfig | None = None,
    ):
        """Initialize remote explorer service.

        Args:
            store: Preference store for the target type selection
            transport: Tunnel transport handed to the tunnel model
            config: Tunnel model configuration
        """
        self._store = store
        self._tunnel_model = TunnelModel(transport=transport, config=config)
        self._help_information: tuple[HelpInformation, ...] = ()
        self.on_did_change_target_type: Emitter[str] = Emitter("target-type-changed")

        stored = store.get(REMOTE_EXPLORER_TYPE_KEY, StorageScope.WORKSPACE)
        if stored is None:
            stored = store.get(REMOTE_EXPLORER_TYPE_KEY, StorageScope.GLOBAL)
        self._target_type = stored or ""

    @property
    def tunnel_model(self) -> TunnelModel:
        return self._tunnel_model

    @property
    def target_type(self) -> str:
        return self._target_type

    @target_type.setter
    def target_type(self, name: str) -> None:
        if self._target_type == name:
            return

        self._target_type = name
        self._store.store(REMOTE_EXPLORER_TYPE_KEY, name, StorageScope.WORKSPACE)
        self._store.store(REMOTE_EXPLORER_TYPE_KEY, name, StorageScope.GLOBAL)
        logger.info("target_type_changed", target_type=name)
        self.on_did_change_target_type.fire(name)

    @property
    def help_information(self) -> tuple[HelpInformation, ...]:
        return self._help_information

    def set_help_contributions(self, contributions: Iterable[HelpContribution]) -> None:
        """Rebuild help information from the current extension contributions.

        Contributions from extensions without proposed API enabled, or
        without any link, are skipped.

        Args:
            contributions: All currently declared help contributions
        """
        accepted = []
        for contribution in contributions:
            if not contribution.enable_proposed_api:
                logger.debug("help_skipped_no_proposed_api", extension=contribution.extension_id)
                continue
            if not contribution.has_links:
                logger.debug("help_skipped_no_links", extension=contribution.extension_id)
                continue
            accepted.append(
                HelpInformation(
                    extension_id=contribution.extension_id,
                    get_started=contribution.get_started,
                    documentation=contribution.documentation,
                    feedback=contribution.feedback,
                    issues=contribution.issues,
                )
            )

        self._help_information = tuple(accepted)
        logger.debug("help_information_updated", count=len(accepted))

    def dispose(self) -> None:
        """Drop all listeners on the service and its tunnel model."""
        self.on_did_change_target_type.clear()
        self._tunnel_model.dispose()
