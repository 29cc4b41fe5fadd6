"""Padding and gap normalization."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real

from uilayout.api.layout import LayoutDirection
from uilayout.runtime.errors import InvalidSpacing

_PADDING_SIDES = ("top", "right", "bottom", "left")
_GAP_DIRECTIONS = ("horizontal", "vertical")


@dataclass(frozen=True, slots=True)
class Padding:
    """Resolved four-side padding."""

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def main(self, direction: LayoutDirection) -> tuple[float, float]:
        """Return (leading, trailing) padding along the main axis."""
        if direction is LayoutDirection.HORIZONTAL:
            return (self.left, self.right)
        return (self.top, self.bottom)

    def cross(self, direction: LayoutDirection) -> tuple[float, float]:
        """Return (leading, trailing) padding along the cross axis."""
        if direction is LayoutDirection.HORIZONTAL:
            return (self.top, self.bottom)
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class Gap:
    """Resolved per-direction gap."""

    horizontal: float = 0.0
    vertical: float = 0.0

    def along(self, direction: LayoutDirection) -> float:
        """Return the gap that separates children laid out in `direction`."""
        if direction is LayoutDirection.HORIZONTAL:
            return self.horizontal
        return self.vertical


PaddingInput = float | Mapping[str, float] | Padding
GapInput = float | Mapping[str, float] | Gap


def resolve_padding(value: PaddingInput) -> Padding:
    """Normalize scalar or per-side padding into a Padding."""
    if isinstance(value, Padding):
        sides = {name: getattr(value, name) for name in _PADDING_SIDES}
    elif isinstance(value, Mapping):
        sides = _pick(value, _PADDING_SIDES, kind="padding")
    else:
        scalar = _spacing_value(value, label="padding")
        return Padding(scalar, scalar, scalar, scalar)
    return Padding(**{name: _spacing_value(v, label=f"padding.{name}") for name, v in sides.items()})


def resolve_gap(value: GapInput) -> Gap:
    """Normalize scalar or per-direction gap into a Gap."""
    if isinstance(value, Gap):
        directions = {"horizontal": value.horizontal, "vertical": value.vertical}
    elif isinstance(value, Mapping):
        directions = _pick(value, _GAP_DIRECTIONS, kind="gap")
    else:
        scalar = _spacing_value(value, label="gap")
        return Gap(scalar, scalar)
    return Gap(**{name: _spacing_value(v, label=f"gap.{name}") for name, v in directions.items()})


def _pick(
    value: Mapping[str, float], allowed: tuple[str, ...], *, kind: str
) -> dict[str, object]:
    unknown = sorted(str(key) for key in value if key not in allowed)
    if unknown:
        raise InvalidSpacing(f"unknown {kind} keys: {', '.join(unknown)}")
    return {name: value.get(name, 0.0) for name in allowed}


def _spacing_value(raw: object, *, label: str) -> float:
    # bool is a Real subclass; reject it explicitly.
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidSpacing(f"{label} must be a number, got {raw!r}")
    value = float(raw)
    if math.isnan(value) or math.isinf(value):
        raise InvalidSpacing(f"{label} must be finite, got {raw!r}")
    if value < 0.0:
        raise InvalidSpacing(f"{label} must be non-negative, got {raw!r}")
    return value
