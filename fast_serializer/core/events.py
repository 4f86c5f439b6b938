"""Minimal event emitter used as the diagnostic side channel."""

from collections.abc import Callable
from typing import Any

Listener = Callable[[dict[str, Any]], Any]


class EventEmitter:
    """Synchronous publish/subscribe for diagnostic events.

    Events carry a single payload dict. Listeners run in registration
    order; their return values are ignored.
    """

    def __init__(self):
        self._listeners: dict[str, list[Listener]] = {}

    def on(self, event: str, listener: Listener) -> None:
        """Subscribe a listener to an event."""
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Listener) -> bool:
        """Unsubscribe a listener. Returns False if it was not subscribed."""
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)
            return True
        return False

    def emit(self, event: str, payload: dict[str, Any]) -> bool:
        """Call every listener of the event. Returns True if any were called."""
        listeners = list(self._listeners.get(event, []))
        for listener in listeners:
            listener(payload)
        return bool(listeners)

    def listener_count(self, event: str) -> int:
        """Number of listeners subscribed to an event."""
        return len(self._listeners.get(event, []))
