"""Layout event contracts.

The set of events is closed: the host window reports viewport size changes,
and a layout tree reports when it becomes dirty and when a pass completes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar


@dataclass(frozen=True, slots=True)
class ViewportResized:
    """Logical size of the surface the root container fills."""

    width: float
    height: float
    dpi_scale: float = 1.0


@dataclass(frozen=True, slots=True)
class LayoutInvalidated:
    """A tree went from clean to dirty; its next ``update()`` runs a pass."""

    root: str


@dataclass(frozen=True, slots=True)
class LayoutPassCompleted:
    """A tree finished a pass; every attached container has a fresh position."""

    root: str
    pass_count: int
    width: float
    height: float


LayoutEvent = ViewportResized | LayoutInvalidated | LayoutPassCompleted
LAYOUT_EVENT_TYPES: tuple[type[LayoutEvent], ...] = (
    ViewportResized,
    LayoutInvalidated,
    LayoutPassCompleted,
)

TEvent = TypeVar("TEvent", ViewportResized, LayoutInvalidated, LayoutPassCompleted)


@dataclass(frozen=True, slots=True)
class Subscription:
    """Token returned by ``subscribe``."""

    id: int
    event_type: type[LayoutEvent]


class LayoutEventBus(Protocol):
    """Delivers layout events to handlers subscribed to their exact type."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription: ...

    def unsubscribe(self, subscription: Subscription) -> None: ...

    def publish(self, event: LayoutEvent) -> int:
        """Deliver event and return the number of handlers invoked."""
        ...


def create_event_bus() -> LayoutEventBus:
    """Create the default dispatcher."""
    from uilayout.runtime.events import LayoutEventDispatcher

    return LayoutEventDispatcher()


__all__ = [
    "LAYOUT_EVENT_TYPES",
    "LayoutEvent",
    "LayoutEventBus",
    "LayoutInvalidated",
    "LayoutPassCompleted",
    "Subscription",
    "ViewportResized",
    "create_event_bus",
]
