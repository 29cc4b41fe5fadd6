"""Declarative container layout engine."""

from uilayout.layout import (
    AlignmentStrategy,
    LayoutDirection,
    PositionStrategy,
    UIContainer,
    UILayoutTree,
)

__all__ = [
    "AlignmentStrategy",
    "LayoutDirection",
    "PositionStrategy",
    "UIContainer",
    "UILayoutTree",
]
