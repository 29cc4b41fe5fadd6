"""Layout tree driver with dirty-flag coalescing."""

from __future__ import annotations

import threading
import weakref
from collections.abc import Iterator

from uilayout.api.events import LayoutEventBus, LayoutInvalidated, LayoutPassCompleted
from uilayout.layout.container import UIContainer
from uilayout.layout.geometry import ORIGIN, Rect
from uilayout.runtime.config import get_layout_config
from uilayout.runtime.errors import LayoutConfigError
from uilayout.runtime.logging import get_layout_logger

_LOG = get_layout_logger(__name__)

ROOT_IDENTITY = "root"


class UILayoutTree:
    """Owns the root container and the single needs-recompute flag.

    The flag starts set, is set again by ``mark_dirty()`` and by any mutation
    of a container attached to this tree, and is cleared only when
    ``update()`` finishes a pass. Any number of mutations between two updates
    coalesce into one pass.

    With an event bus, the tree publishes ``LayoutInvalidated`` when the flag
    goes from clear to set and ``LayoutPassCompleted`` after each pass.
    """

    def __init__(
        self,
        root: UIContainer | None = None,
        *,
        width: float | None = None,
        height: float | None = None,
        trace: bool | None = None,
        events: LayoutEventBus | None = None,
    ) -> None:
        config = get_layout_config()
        self._lock = threading.RLock()
        self._dirty = True
        self._pass_count = 0
        self._trace = config.trace_enabled if trace is None else bool(trace)
        self._events = events
        if root is None:
            root = UIContainer(
                ROOT_IDENTITY,
                config.canvas.width if width is None else width,
                config.canvas.height if height is None else height,
            )
        else:
            if root.parent is not None:
                raise LayoutConfigError(f"root container {root.identity!r} already has a parent")
            if root._owning_tree() is not None:
                raise LayoutConfigError(
                    f"root container {root.identity!r} already belongs to a layout tree"
                )
            if width is not None or height is not None:
                root.set_size(
                    root.size.w if width is None else width,
                    root.size.h if height is None else height,
                )
        self._root = root
        root._attach_tree(weakref.ref(self))

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def root(self) -> UIContainer:
        return self._root

    def is_dirty(self) -> bool:
        with self._lock:
            return self._dirty

    def pass_count(self) -> int:
        """Return the number of completed layout passes."""
        with self._lock:
            return self._pass_count

    def mark_dirty(self) -> None:
        """Request a recompute on the next update; idempotent."""
        with self._lock:
            invalidated = not self._dirty
            self._dirty = True
            if invalidated and self._events is not None:
                self._events.publish(LayoutInvalidated(root=self._root.identity))

    def resize(self, width: float, height: float) -> None:
        """Replace the root size, e.g. after a viewport resize."""
        self._root.set_size(width, height)

    def update(self) -> bool:
        """Run one full layout pass if dirty; return whether a pass ran."""
        with self._lock:
            if not self._dirty:
                return False
            self._root.recompute(ORIGIN, trace=self._trace)
            self._dirty = False
            self._pass_count += 1
            completed = LayoutPassCompleted(
                root=self._root.identity,
                pass_count=self._pass_count,
                width=self._root.size.w,
                height=self._root.size.h,
            )
        _LOG.debug(
            "layout_pass_complete",
            extra={
                "container": completed.root,
                "pass_count": completed.pass_count,
                "width": completed.width,
                "height": completed.height,
            },
        )
        if self._events is not None:
            self._events.publish(completed)
        return True

    def iter_rects(self) -> Iterator[tuple[tuple[str, ...], Rect]]:
        """Yield (identity path, world rect) for every laid-out container."""
        for path, container in self._root.walk():
            rect = container.rect()
            if rect is not None:
                yield path, rect

    def find(self, path: tuple[str, ...] | list[str]) -> UIContainer | None:
        """Resolve an identity path starting at the root identity."""
        if not path or path[0] != self._root.identity:
            return None
        node: UIContainer | None = self._root
        for identity in path[1:]:
            if node is None:
                return None
            node = node.find_child_container(identity)
        return node


LayoutTree = UILayoutTree

__all__ = ["LayoutTree", "ROOT_IDENTITY", "UILayoutTree"]
