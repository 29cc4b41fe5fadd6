"""Bridge from viewport resize delivery to layout invalidation."""

from __future__ import annotations

from uilayout.api.events import LayoutEventBus, Subscription, ViewportResized
from uilayout.layout.layout_tree import UILayoutTree
from uilayout.runtime.debug_config import DebugConfig, load_debug_config
from uilayout.runtime.logging import get_layout_logger

_LOG = get_layout_logger(__name__)


class ResizeBinding:
    """Resize a tree's root to the viewport on each ``ViewportResized`` event."""

    def __init__(
        self,
        tree: UILayoutTree,
        events: LayoutEventBus,
        *,
        debug_config: DebugConfig | None = None,
    ) -> None:
        self._tree = tree
        self._events = events
        self._debug = load_debug_config() if debug_config is None else debug_config
        self._subscription: Subscription | None = events.subscribe(
            ViewportResized, self._on_resize
        )

    @property
    def active(self) -> bool:
        return self._subscription is not None

    def close(self) -> None:
        if self._subscription is None:
            return
        self._events.unsubscribe(self._subscription)
        self._subscription = None

    def _on_resize(self, event: ViewportResized) -> None:
        width = float(event.width)
        height = float(event.height)
        if not (width > 0.0 and height > 0.0):
            _LOG.debug("resize_ignored", extra={"width": width, "height": height})
            return
        if self._debug.resize_trace_enabled:
            _LOG.debug(
                "resize_applied",
                extra={"width": width, "height": height, "dpi_scale": event.dpi_scale},
            )
        self._tree.resize(width, height)


def bind_resize_events(
    tree: UILayoutTree,
    events: LayoutEventBus,
    *,
    debug_config: DebugConfig | None = None,
) -> ResizeBinding:
    return ResizeBinding(tree, events, debug_config=debug_config)


__all__ = ["ResizeBinding", "bind_resize_events"]
