"""Container layout engine."""

from uilayout.api.layout import AlignmentStrategy, LayoutDirection, PositionStrategy
from uilayout.layout.alignment import cross_axis_offset
from uilayout.layout.container import UIContainer
from uilayout.layout.distribution import main_axis_offsets
from uilayout.layout.geometry import ORIGIN, Point, Rect, Size
from uilayout.layout.layout_tree import LayoutTree, UILayoutTree
from uilayout.layout.snapshot import dump_snapshot_text, snapshot_tree
from uilayout.layout.spacing import Gap, Padding, resolve_gap, resolve_padding

__all__ = [
    "AlignmentStrategy",
    "Gap",
    "LayoutDirection",
    "LayoutTree",
    "ORIGIN",
    "Padding",
    "Point",
    "PositionStrategy",
    "Rect",
    "Size",
    "UIContainer",
    "UILayoutTree",
    "cross_axis_offset",
    "dump_snapshot_text",
    "main_axis_offsets",
    "resolve_gap",
    "resolve_padding",
    "snapshot_tree",
]
