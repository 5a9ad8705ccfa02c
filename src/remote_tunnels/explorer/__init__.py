"""Remote explorer service and its preference storage."""

from .models import HelpContribution, HelpInformation
from .service import REMOTE_EXPLORER_TYPE_KEY, RemoteExplorerService
from .storage import InMemoryPreferenceStore, PreferenceStore, StorageScope

__all__ = [
    "RemoteExplorerService",
    "REMOTE_EXPLORER_TYPE_KEY",
    "HelpContribution",
    "HelpInformation",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "StorageScope",
]
