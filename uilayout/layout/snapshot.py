"""Poll-based export of computed layout geometry."""

from __future__ import annotations

from typing import Any

from uilayout.diagnostics.json_codec import dumps_text
from uilayout.layout.layout_tree import UILayoutTree


def snapshot_tree(tree: UILayoutTree) -> dict[str, Any]:
    """Return a JSON-ready view of every container in the tree."""
    containers: list[dict[str, Any]] = []
    for path, container in tree.root().walk():
        rect = container.rect()
        containers.append(
            {
                "path": "/".join(path),
                "rect": None if rect is None else [rect.x, rect.y, rect.w, rect.h],
                "direction": str(container.layout_direction),
                "position_strategy": str(container.position_strategy),
                "alignment_strategy": str(container.alignment_strategy),
                "children": container.child_count(),
            }
        )
    return {
        "pass_count": tree.pass_count(),
        "dirty": tree.is_dirty(),
        "containers": containers,
    }


def dump_snapshot_text(tree: UILayoutTree, *, pretty: bool = False) -> str:
    """Serialize the tree snapshot to JSON text."""
    return dumps_text(snapshot_tree(tree), pretty=pretty)


__all__ = ["dump_snapshot_text", "snapshot_tree"]
