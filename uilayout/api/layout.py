"""Layout strategy identifiers accepted by container configuration."""

from __future__ import annotations

from enum import StrEnum
from typing import TypeVar

from uilayout.runtime.errors import UnknownStrategy


class LayoutDirection(StrEnum):
    """Axis along which a container distributes its direct children."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: LayoutDirection | str) -> LayoutDirection:
        return _parse_tag(cls, value, kind="layout direction")


class PositionStrategy(StrEnum):
    """Main-axis distribution strategy."""

    FIXED = "fixed"
    ANCHOR_START = "anchor-start"
    ANCHOR_END = "anchor-end"
    CENTER = "center"
    SPACE_BETWEEN = "space-between"
    SPACE_AROUND = "space-around"
    SPACE_EVENLY = "space-evenly"

    @classmethod
    def parse(cls, value: PositionStrategy | str) -> PositionStrategy:
        return _parse_tag(cls, value, kind="position strategy")


class AlignmentStrategy(StrEnum):
    """Cross-axis alignment applied uniformly to direct children."""

    ANCHOR_START = "anchor-start"
    CENTER = "center"
    ANCHOR_END = "anchor-end"

    @classmethod
    def parse(cls, value: AlignmentStrategy | str) -> AlignmentStrategy:
        return _parse_tag(cls, value, kind="alignment strategy")


TTag = TypeVar("TTag", bound=StrEnum)


def _parse_tag(enum_type: type[TTag], value: object, *, kind: str) -> TTag:
    if isinstance(value, enum_type):
        return value
    if not isinstance(value, str):
        raise UnknownStrategy(f"unknown {kind}: {value!r}")
    normalized = value.strip().lower().replace("_", "-")
    try:
        return enum_type(normalized)
    except ValueError:
        raise UnknownStrategy(f"unknown {kind}: {value!r}") from None
