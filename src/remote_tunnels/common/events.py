"""Multicast event channels for tunnel state notifications."""

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by :meth:`Emitter.subscribe`; dispose to stop listening."""

    def __init__(self, emitter: "Emitter", listener: Callable) -> None:
        self._emitter = emitter
        self._listener = listener
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Remove the listener. Disposing twice does nothing."""
        if not self._disposed:
            self._disposed = True
            self._emitter._remove(self._listener)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.dispose()


class Emitter(Generic[T]):
    """Synchronous event channel delivering one payload type to its listeners.

    Listeners run in subscription order on the thread that calls
    :meth:`fire`. A listener that raises is logged and does not prevent the
    remaining listeners from running.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Listener[T]] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: Listener[T]) -> Subscription:
        """Register a listener.

        Args:
            listener: Callable invoked with each fired payload

        Returns:
            Subscription that unregisters the listener when disposed
        """
        with self._lock:
            self._listeners.append(listener)
        return Subscription(self, listener)

    def __call__(self, listener: Listener[T]) -> Subscription:
        return self.subscribe(listener)

    def _remove(self, listener: Callable) -> None:
        with self._lock:
            try:
                self._listeners.remove(listener)
            except ValueError:
                logger.debug(f"Listener already removed from event {self.name}")

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def fire(self, payload: T) -> None:
        """Deliver payload to every current listener."""
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(payload)
            except Exception as e:
                logger.error(f"Listener error for event {self.name}: {e}", exc_info=True)

    def clear(self) -> None:
        """Drop all listeners."""
        with self._lock:
            self._listeners.clear()
