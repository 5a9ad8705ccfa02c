"""Preference storage used by the remote explorer service."""

import threading
from enum import Enum
from typing import Protocol, runtime_checkable


class StorageScope(str, Enum):
    """Where a preference is persisted."""

    GLOBAL = "global"
    WORKSPACE = "workspace"


@runtime_checkable
class PreferenceStore(Protocol):
    """Key/value persistence for UI preferences."""

    def store(self, key: str, value: str, scope: StorageScope) -> None:
        ...

    def get(self, key: str, scope: StorageScope, default: str | None = None) -> str | None:
        ...


class InMemoryPreferenceStore:
    """Process-local preference store, one dictionary per scope."""

    def __init__(self) -> None:
        self._values: dict[StorageScope, dict[str, str]] = {
            scope: {} for scope in StorageScope
        }
        self._lock = threading.Lock()

    def store(self, key: str, value: str, scope: StorageScope) -> None:
        with self._lock:
            self._values[scope][key] = value

    def get(self, key: str, scope: StorageScope, default: str | None = None) -> str | None:
        with self._lock:
            return self._values[scope].get(key, default)
