"""Phase 3: Intersecting nodes in compositing order.

Eligible intersecting nodes, deepest first, then lowest sibling index.
Siblings of the target must sit at a lower index; nodes in other branches
are taken to be below it.
"""

from __future__ import annotations

from backdrop.engine.blend import candidate_color
from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.engine.snapshot import SnapshotNode
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB
from backdrop.utils.geometry import intersects


def is_below_target(node: SnapshotNode, target: SnapshotNode) -> bool:
    if node.parent_id is not None and node.parent_id == target.parent_id:
        return node.z_index < target.z_index
    return True


@phase(
    order=3,
    source=BackgroundSource.INTERSECTING_NODE,
    requires={"candidates"},
    description="Topmost eligible intersecting node below the target",
)
def intersecting_nodes(ctx: ResolutionContext) -> RGB | None:
    target = ctx.target
    for node in ctx.candidates:
        if node.id == target.id:
            continue
        if intersects(node.bbox, target.bbox) and is_below_target(node, target):
            return candidate_color(node)
    return None
