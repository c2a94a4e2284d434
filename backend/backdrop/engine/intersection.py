"""Intersection finder: which visible nodes overlap the selection from below.

One recursive collector, parameterized by an upper sibling bound. At the page
level the bound is the selection's own index when the selection is a direct
child of the page, and absent otherwise. Inside every ancestor of the
selection the bound narrows to the index of the child leading down to the
selection, so siblings stacked above the target are never collected.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from backdrop.engine.cache import ResolutionCache
from backdrop.engine.provider import SceneGraphProvider, SceneNodeRef
from backdrop.engine.snapshot import (
    IntersectionSet,
    SnapshotNode,
    ancestors,
    build_page_snapshot,
    build_snapshot,
    nesting_level,
)
from backdrop.models.scene import NodeType
from backdrop.utils.geometry import has_area, overlap_mask

logger = logging.getLogger(__name__)


def _page_id(node: SceneNodeRef) -> str:
    current = node.parent
    while current is not None:
        if current.type == NodeType.PAGE:
            return current.id
        current = current.parent
    return "page"


def find_intersecting(
    selected: SceneNodeRef,
    provider: SceneGraphProvider,
    cache: ResolutionCache | None = None,
) -> IntersectionSet:
    """Collect every visible node overlapping ``selected`` that may sit below it."""
    if cache is not None:
        cached = cache.get_intersections(selected.id, provider)
        if cached is not None:
            logger.debug("Using cached intersections for %s", selected.name)
            return cached

    start = time.perf_counter()
    target = selected.bbox

    # ancestor id -> index of its child on the path down to the selection
    path_bounds: dict[str, int] = {}
    below = selected
    for ancestor in ancestors(selected):
        path_bounds[ancestor.id] = provider.sibling_index(below)
        below = ancestor

    root_level = nesting_level(selected, cache) == 0
    page_bound = provider.sibling_index(selected) if root_level else None
    visited = 0

    def _collect(children: Sequence[SceneNodeRef], upper_bound: int | None) -> tuple[SnapshotNode, ...]:
        nonlocal visited
        if upper_bound is not None:
            children = children[: upper_bound + 1]
        if not children:
            return ()
        visited += len(children)
        mask = overlap_mask([c.bbox for c in children], target)
        found: list[SnapshotNode] = []
        for child, hit in zip(children, mask):
            # The selection and everything nested in it render above it
            if not hit or child.id == selected.id:
                continue
            snap = build_snapshot(child, provider, selected.id, cache)
            if not snap.effectively_visible:
                continue
            nested = _collect(child.children, path_bounds.get(child.id))
            found.append(snap.with_children(nested))
        return tuple(found)

    forest: tuple[SnapshotNode, ...] = ()
    if has_area(target):
        forest = _collect(provider.get_page_children(), page_bound)

    page = build_page_snapshot(_page_id(selected), provider.get_page_background())
    result = IntersectionSet(root=page.with_children(forest), selected_id=selected.id)

    logger.debug(
        "Intersections for %s: %d nodes (%d visited) in %.1fms",
        selected.name,
        len(result),
        visited,
        (time.perf_counter() - start) * 1000,
    )
    if cache is not None:
        cache.put_intersections(selected.id, result)
    return result
