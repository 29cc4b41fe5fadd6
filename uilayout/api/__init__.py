"""Public layout API contracts."""

from uilayout.api.events import (
    LayoutEventBus,
    LayoutInvalidated,
    LayoutPassCompleted,
    Subscription,
    ViewportResized,
    create_event_bus,
)
from uilayout.api.layout import AlignmentStrategy, LayoutDirection, PositionStrategy
from uilayout.api.logging import LayoutLoggingConfig

__all__ = [
    "AlignmentStrategy",
    "LayoutDirection",
    "LayoutEventBus",
    "LayoutInvalidated",
    "LayoutLoggingConfig",
    "LayoutPassCompleted",
    "PositionStrategy",
    "Subscription",
    "ViewportResized",
    "create_event_bus",
]
