"""In-process event emitter for messages coming from the host."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

Listener = Callable[[Any], Any]


class Subscription:
    """Handle returned by add_listener. remove() is idempotent."""

    def __init__(self, emitter: "EventEmitter", event: str, listener: Listener) -> None:
        self.emitter = emitter
        self.event = event
        self.listener = listener
        self.active = True

    def remove(self) -> None:
        """Stop delivering events to the listener."""
        if not self.active:
            return
        self.active = False
        self.emitter._discard(self)

    def __repr__(self) -> str:
        return f"Subscription(event={self.event!r}, active={self.active})"


class EventEmitter:
    """
    Delivers host events to listeners, synchronously and in
    subscription order. A listener that raises stops the delivery and
    the error reaches the caller of emit().
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Subscription]] = defaultdict(list)

    def add_listener(self, event: str, listener: Listener) -> Subscription:
        """Subscribe to an event."""
        subscription = Subscription(self, event, listener)
        self._listeners[event].append(subscription)
        return subscription

    def emit(self, event: str, body: Any = None) -> int:
        """
        Deliver an event to its current listeners.

        Returns:
            Number of listeners invoked
        """
        delivered = 0
        for subscription in list(self._listeners.get(event, ())):
            if not subscription.active:
                continue
            subscription.listener(body)
            delivered += 1
        return delivered

    def listener_count(self, event: str) -> int:
        """Number of active listeners for an event."""
        return len(self._listeners.get(event, ()))

    def _discard(self, subscription: Subscription) -> None:
        listeners = self._listeners.get(subscription.event)
        if not listeners:
            return
        try:
            listeners.remove(subscription)
        except ValueError:
            return
        if not listeners:
            del self._listeners[subscription.event]
