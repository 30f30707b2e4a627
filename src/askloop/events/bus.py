"""Synchronous event bus for questionnaire lifecycle events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus that dispatches on the caller's thread.

    Wildcard listeners see every event first, then listeners registered for
    the event's exact type, each group in registration order. A listener that
    raises aborts the ask() call that emitted the event.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._wildcard: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> Callable[[], None]:
        """Register a listener for one event type; returns an unsubscribe callable."""
        listeners = self._by_type.setdefault(event_type, [])
        listeners.append(listener)
        return _remover(listeners, listener)

    def on_all(self, listener: Listener) -> Callable[[], None]:
        """Register a listener for every event; returns an unsubscribe callable."""
        self._wildcard.append(listener)
        return _remover(self._wildcard, listener)

    def emit(self, event: Any) -> None:
        for listener in list(self._wildcard):
            listener(event)
        for listener in list(self._by_type.get(type(event), ())):
            listener(event)


def _remover(listeners: list[Listener], listener: Listener) -> Callable[[], None]:
    """Build an unsubscribe callable; calling it again is a no-op."""

    def remove() -> None:
        if listener in listeners:
            listeners.remove(listener)

    return remove
