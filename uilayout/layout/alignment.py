"""Cross-axis alignment."""

from __future__ import annotations

from collections.abc import Callable

from uilayout.api.layout import AlignmentStrategy

AlignFn = Callable[[float, float], float]

ALIGNMENTS: dict[AlignmentStrategy, AlignFn] = {
    AlignmentStrategy.ANCHOR_START: lambda content, child: 0.0,
    AlignmentStrategy.CENTER: lambda content, child: (content - child) / 2.0,
    AlignmentStrategy.ANCHOR_END: lambda content, child: content - child,
}


def cross_axis_offset(
    mode: AlignmentStrategy | str, content_cross: float, child_cross: float
) -> float:
    """Return child's cross-axis offset relative to the content box."""
    return float(ALIGNMENTS[AlignmentStrategy.parse(mode)](float(content_cross), float(child_cross)))


__all__ = ["ALIGNMENTS", "AlignFn", "cross_axis_offset"]
