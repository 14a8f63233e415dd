"""Synchronous publish/subscribe between catalog, state store, and UI."""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

SATELLITES_UPDATED = "satellites_updated"
LOCATION_CHANGED = "location_changed"

Callback = Callable[[Any], None]


class EventBus:
    """Explicit event channel. Pass an instance to whoever publishes or listens."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callback]] = defaultdict(list)

    def subscribe(self, event: str, callback: Callback) -> None:
        self._subscribers[event].append(callback)

    def unsubscribe(self, event: str, callback: Callback) -> None:
        """Remove every registration of ``callback`` for ``event``. Unknown pairs are ignored."""
        if event in self._subscribers:
            self._subscribers[event] = [
                cb for cb in self._subscribers[event] if cb is not callback
            ]

    def publish(self, event: str, payload: Any = None) -> None:
        """Call subscribers in registration order. Subscriber errors propagate."""
        callbacks = list(self._subscribers.get(event, ()))
        logger.debug("publish %s to %d subscriber(s)", event, len(callbacks))
        for callback in callbacks:
            callback(payload)
