"""Synchronous dispatcher for layout events."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from uilayout.api.events import LAYOUT_EVENT_TYPES, LayoutEvent, Subscription, TEvent

LayoutEventHandler = Callable[[Any], None]


class LayoutEventDispatcher:
    """Route each layout event to the handlers subscribed to its exact type.

    Handlers run on the publishing thread in subscription order. A tree
    publishes ``LayoutInvalidated`` from inside a mutation, so those handlers
    run while the tree lock is held. Subscribing or unsubscribing from a
    handler takes effect on the next publish.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next_id = 1
        self._handlers: dict[type[LayoutEvent], dict[int, LayoutEventHandler]] = {
            event_type: {} for event_type in LAYOUT_EVENT_TYPES
        }

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        if event_type not in self._handlers:
            raise TypeError(f"{event_type!r} is not a layout event type")
        with self._lock:
            sub_id = self._next_id
            self._next_id += 1
            self._handlers[event_type][sub_id] = handler
        return Subscription(sub_id, event_type)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription; unknown or already removed tokens are ignored."""
        with self._lock:
            self._handlers.get(subscription.event_type, {}).pop(subscription.id, None)

    def handler_count(self, event_type: type[LayoutEvent] | None = None) -> int:
        with self._lock:
            if event_type is None:
                return sum(len(handlers) for handlers in self._handlers.values())
            return len(self._handlers.get(event_type, {}))

    def publish(self, event: LayoutEvent) -> int:
        handlers = self._handlers.get(type(event))
        if handlers is None:
            raise TypeError(f"{type(event).__name__} is not a layout event")
        with self._lock:
            snapshot = tuple(handlers.values())
        for handler in snapshot:
            handler(event)
        return len(snapshot)


__all__ = ["LayoutEventDispatcher", "LayoutEventHandler"]
