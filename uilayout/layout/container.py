"""Layout tree node and the placement pass."""

from __future__ import annotations

import math
import weakref
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from numbers import Real
from typing import Protocol

from uilayout.api.layout import AlignmentStrategy, LayoutDirection, PositionStrategy
from uilayout.layout.alignment import cross_axis_offset
from uilayout.layout.distribution import main_axis_offsets
from uilayout.layout.geometry import ORIGIN, Point, Rect, Size
from uilayout.layout.spacing import Gap, GapInput, Padding, PaddingInput, resolve_gap, resolve_padding
from uilayout.runtime.errors import IndexOutOfRange, LayoutConfigError
from uilayout.runtime.logging import get_layout_logger

_LOG = get_layout_logger(__name__)


class LayoutTreeHandle(Protocol):
    """Owning-tree surface a container needs to report mutations."""

    @property
    def lock(self) -> AbstractContextManager[object]: ...

    def mark_dirty(self) -> None: ...


class UIContainer:
    """Rectangular node that places its direct children along one axis.

    Size is always supplied by the caller. Position is owned by the layout
    pass: it stays ``None`` until the first pass reaches the container and is
    overwritten on every pass after that.
    """

    def __init__(
        self,
        identity: str,
        width: float,
        height: float,
        *,
        layout_direction: LayoutDirection | str = LayoutDirection.HORIZONTAL,
        position_strategy: PositionStrategy | str = PositionStrategy.ANCHOR_START,
        alignment_strategy: AlignmentStrategy | str = AlignmentStrategy.ANCHOR_START,
        padding: PaddingInput = 0.0,
        gap: GapInput = 0.0,
        offset: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        if not isinstance(identity, str) or not identity:
            raise LayoutConfigError(f"container identity must be a non-empty string: {identity!r}")
        self._identity = identity
        self._size = _validated_size(width, height)
        self._offset = _validated_offset(offset)
        self._direction = LayoutDirection.parse(layout_direction)
        self._position_strategy = PositionStrategy.parse(position_strategy)
        self._alignment_strategy = AlignmentStrategy.parse(alignment_strategy)
        self._padding = resolve_padding(padding)
        self._gap = resolve_gap(gap)
        self._position: Point | None = None
        self._children: list[UIContainer] = []
        self._parent: weakref.ref[UIContainer] | None = None
        self._tree: weakref.ref[LayoutTreeHandle] | None = None

    def __repr__(self) -> str:
        return (
            f"UIContainer({self._identity!r}, {self._size.w}x{self._size.h}, "
            f"{self._direction}, {self._position_strategy}, children={len(self._children)})"
        )

    @property
    def identity(self) -> str:
        return self._identity

    @property
    def size(self) -> Size:
        return self._size

    @property
    def offset(self) -> Point:
        """Hand-placed offset inside the parent's content box."""
        return self._offset

    @property
    def position(self) -> Point | None:
        """World position assigned by the most recent layout pass."""
        return self._position

    @property
    def layout_direction(self) -> LayoutDirection:
        return self._direction

    @property
    def position_strategy(self) -> PositionStrategy:
        return self._position_strategy

    @property
    def alignment_strategy(self) -> AlignmentStrategy:
        return self._alignment_strategy

    @property
    def padding(self) -> Padding:
        return self._padding

    @property
    def gap(self) -> Gap:
        return self._gap

    @property
    def children(self) -> tuple[UIContainer, ...]:
        return tuple(self._children)

    @property
    def parent(self) -> UIContainer | None:
        return None if self._parent is None else self._parent()

    def get_dimension(self) -> Size:
        """Return the container's fixed size."""
        return self._size

    def rect(self) -> Rect | None:
        """Return the world rectangle, or None before the first pass."""
        if self._position is None:
            return None
        return Rect(self._position.x, self._position.y, self._size.w, self._size.h)

    def child_count(self) -> int:
        return len(self._children)

    def get_child_container(self, index: int) -> UIContainer:
        """Return the child at `index` in distribution order."""
        if not isinstance(index, int) or not 0 <= index < len(self._children):
            raise IndexOutOfRange(
                f"child index {index!r} out of range for {self._identity!r} "
                f"with {len(self._children)} children"
            )
        return self._children[index]

    def find_child_container(self, identity: str) -> UIContainer | None:
        for child in self._children:
            if child._identity == identity:
                return child
        return None

    def add_child_container(self, child: UIContainer) -> UIContainer:
        """Append a child; the owning tree is marked dirty, nothing is recomputed."""
        if not isinstance(child, UIContainer):
            raise LayoutConfigError(f"child must be a UIContainer, got {type(child).__name__}")
        with self._mutation():
            if child._parent is not None:
                raise LayoutConfigError(f"container {child._identity!r} already has a parent")
            owner = child._owning_tree()
            if owner is not None and owner is not self._owning_tree():
                raise LayoutConfigError(
                    f"container {child._identity!r} is the root of another layout tree"
                )
            if child is self or any(ancestor is child for ancestor in self._ancestors()):
                raise LayoutConfigError(f"adding {child._identity!r} would create a cycle")
            if self.find_child_container(child._identity) is not None:
                raise LayoutConfigError(
                    f"duplicate child identity {child._identity!r} under {self._identity!r}"
                )
            self._children.append(child)
            child._parent = weakref.ref(self)
            child._attach_tree(self._tree)
        return child

    def remove_child_container(self, child: UIContainer) -> None:
        """Detach a child and its subtree from future passes."""
        with self._mutation():
            if not any(existing is child for existing in self._children):
                raise LayoutConfigError(
                    f"container {getattr(child, 'identity', child)!r} is not a child of {self._identity!r}"
                )
            self._children = [existing for existing in self._children if existing is not child]
            child._parent = None
            child._attach_tree(None)

    def set_size(self, width: float, height: float) -> None:
        size = _validated_size(width, height)
        with self._mutation():
            self._size = size

    def set_offset(self, x: float, y: float) -> None:
        offset = _validated_offset((x, y))
        with self._mutation():
            self._offset = offset

    def set_layout_direction(self, value: LayoutDirection | str) -> None:
        direction = LayoutDirection.parse(value)
        with self._mutation():
            self._direction = direction

    def set_position_strategy(self, value: PositionStrategy | str) -> None:
        strategy = PositionStrategy.parse(value)
        with self._mutation():
            self._position_strategy = strategy

    def set_alignment_strategy(self, value: AlignmentStrategy | str) -> None:
        strategy = AlignmentStrategy.parse(value)
        with self._mutation():
            self._alignment_strategy = strategy

    def set_padding(self, value: PaddingInput) -> None:
        padding = resolve_padding(value)
        with self._mutation():
            self._padding = padding

    def set_gap(self, value: GapInput) -> None:
        gap = resolve_gap(value)
        with self._mutation():
            self._gap = gap

    def walk(self, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], UIContainer]]:
        """Yield (identity path, container) for this subtree, depth-first pre-order."""
        pending: list[tuple[tuple[str, ...], UIContainer]] = [((*path, self._identity), self)]
        while pending:
            here, node = pending.pop()
            yield here, node
            pending.extend(((*here, child._identity), child) for child in reversed(node._children))

    def recompute(self, parent_origin: Point = ORIGIN, *, trace: bool = False) -> None:
        """Place this container at `parent_origin` and lay out its whole subtree.

        The pass walks the subtree with an explicit stack, so depth is bounded
        only by memory. Every position is computed before any is written: if
        the pass raises, no container in the subtree has moved.
        """
        placements: list[tuple[UIContainer, Point]] = []
        pending: list[tuple[UIContainer, Point]] = [(self, parent_origin)]
        while pending:
            node, origin = pending.pop()
            placements.append((node, origin))
            children = tuple(node._children)
            if children:
                origins = node._child_origins(children, origin, trace=trace)
                pending.extend(reversed(tuple(zip(children, origins))))
        for node, origin in placements:
            node._position = origin

    def _child_origins(
        self, children: tuple[UIContainer, ...], origin: Point, *, trace: bool
    ) -> list[Point]:
        # Spacing is resolved and validated when it is set.
        padding = self._padding
        direction = self._direction
        horizontal = direction is LayoutDirection.HORIZONTAL

        main_lead, main_trail = padding.main(direction)
        cross_lead, cross_trail = padding.cross(direction)
        main_length, cross_length = _along(self._size.w, self._size.h, horizontal)
        available = main_length - main_lead - main_trail
        content_cross = cross_length - cross_lead - cross_trail

        main_sizes: list[float] = []
        cross_sizes: list[float] = []
        main_current: list[float] = []
        cross_current: list[float] = []
        for child in children:
            child_main, child_cross = _along(child._size.w, child._size.h, horizontal)
            offset_main, offset_cross = _along(child._offset.x, child._offset.y, horizontal)
            main_sizes.append(child_main)
            cross_sizes.append(child_cross)
            main_current.append(offset_main)
            cross_current.append(offset_cross)

        fixed = self._position_strategy is PositionStrategy.FIXED
        main_offsets = main_axis_offsets(
            self._position_strategy,
            main_sizes,
            available,
            self._gap.along(direction),
            main_current,
        )
        cross_offsets = [
            cross_axis_offset(self._alignment_strategy, content_cross, child_cross)
            + (hand_placed if fixed else 0.0)
            for child_cross, hand_placed in zip(cross_sizes, cross_current)
        ]

        if trace:
            _LOG.debug(
                "layout_container",
                extra={
                    "container": self._identity,
                    "origin_x": origin.x,
                    "origin_y": origin.y,
                    "strategy": self._position_strategy.value,
                    "alignment": self._alignment_strategy.value,
                    "available": available,
                },
            )

        content_origin = origin.translated(padding.left, padding.top)
        return [
            content_origin.translated(*_xy(main_offset, cross_offset, horizontal))
            for main_offset, cross_offset in zip(main_offsets, cross_offsets)
        ]

    def _ancestors(self) -> Iterator[UIContainer]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def _owning_tree(self) -> LayoutTreeHandle | None:
        return None if self._tree is None else self._tree()

    def _attach_tree(self, tree: weakref.ref[LayoutTreeHandle] | None) -> None:
        # A subtree always shares one tree reference, so checking its top is enough.
        if self._tree is tree:
            return
        pending = [self]
        while pending:
            node = pending.pop()
            node._tree = tree
            pending.extend(node._children)

    @contextmanager
    def _mutation(self) -> Iterator[None]:
        """Hold the owning tree's lock for the body and mark the tree dirty if it succeeds."""
        tree = self._owning_tree()
        if tree is None:
            yield
            return
        with tree.lock:
            yield
            tree.mark_dirty()


def _along(horizontal_value: float, vertical_value: float, horizontal: bool) -> tuple[float, float]:
    """Return (main, cross) components of an x/y pair."""
    if horizontal:
        return (horizontal_value, vertical_value)
    return (vertical_value, horizontal_value)


def _xy(main: float, cross: float, horizontal: bool) -> tuple[float, float]:
    if horizontal:
        return (main, cross)
    return (cross, main)


def _validated_size(width: float, height: float) -> Size:
    w = _finite(width, label="width")
    h = _finite(height, label="height")
    if w < 0.0 or h < 0.0:
        raise LayoutConfigError(f"container size must be non-negative, got {width!r}x{height!r}")
    return Size(w, h)


def _validated_offset(offset: tuple[float, float]) -> Point:
    try:
        x, y = offset
    except (TypeError, ValueError):
        raise LayoutConfigError(f"offset must be an (x, y) pair, got {offset!r}") from None
    return Point(_finite(x, label="offset.x"), _finite(y, label="offset.y"))


def _finite(raw: object, *, label: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise LayoutConfigError(f"{label} must be a number, got {raw!r}")
    value = float(raw)
    if math.isnan(value) or math.isinf(value):
        raise LayoutConfigError(f"{label} must be finite, got {raw!r}")
    return value


__all__ = ["LayoutTreeHandle", "UIContainer"]
