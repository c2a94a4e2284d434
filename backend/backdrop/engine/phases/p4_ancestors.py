"""Phase 4: Containers of intersecting nodes.

Walks a bounded number of ancestor levels above each intersecting node
looking for an eligible container that fully covers the target.
"""

from __future__ import annotations

import logging

from backdrop.engine.blend import Eligibility, candidate_color, classify, is_supported
from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB, NodeType
from backdrop.utils.geometry import contains

logger = logging.getLogger(__name__)


@phase(
    order=4,
    source=BackgroundSource.ANCESTOR,
    requires={"candidates"},
    description="Nearest eligible ancestor of an intersecting node that contains the target",
)
def intersecting_ancestors(ctx: ResolutionContext) -> RGB | None:
    limit = ctx.config.ancestor_depth_limit
    target_box = ctx.target.bbox

    for node in ctx.ordered:
        if ctx.verdicts.get(node.id) == Eligibility.INELIGIBLE_BLEND:
            continue
        host = ctx.provider.get_node_by_id(node.id)
        if host is None:
            continue

        current = host.parent
        level = 1
        while current is not None and current.type != NodeType.PAGE and level <= limit:
            if not is_supported(current.blend_mode):
                logger.debug("  ancestor %s stops the walk: %s", current.name, current.blend_mode)
                break
            if classify(current) == Eligibility.ELIGIBLE and contains(current.bbox, target_box):
                return candidate_color(current)
            current = current.parent
            level += 1
    return None
