"""Flatten an intersection forest and sort it into scan order.

The resolver walks the sorted list from the front. Deeper nesting comes
first, since nested content paints in front of the container around it.
Within one nesting level the lower sibling index comes first. Nodes from
unrelated branches are only ordered by this approximation; ties keep
pre-order traversal order.
"""

from __future__ import annotations

from dataclasses import replace

from backdrop.engine.snapshot import SnapshotNode


def flatten(root: SnapshotNode) -> list[SnapshotNode]:
    """Pre-order list of ``root``'s descendants, nesting restamped from ``root``."""
    flat: list[SnapshotNode] = []

    def _visit(node: SnapshotNode, level: int) -> None:
        for child in node.children:
            stamped = replace(child, nesting_level=level)
            flat.append(stamped)
            _visit(child, level + 1)

    _visit(root, root.nesting_level + 1)
    return flat


def compositing_key(node: SnapshotNode) -> tuple[int, int]:
    return (-node.nesting_level, abs(node.z_index))


def sort_by_compositing_order(nodes: list[SnapshotNode]) -> list[SnapshotNode]:
    # sorted() is stable, which is what keeps equal keys in traversal order
    return sorted(nodes, key=compositing_key)
