"""Phase 1: Siblings behind the target.

Siblings below the target in the same parent, scanned nearest first. The first
eligible one whose box overlaps or encloses the target wins.
"""

from __future__ import annotations

import logging

from backdrop.engine.blend import Eligibility, candidate_color, classify
from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.engine.snapshot import is_effectively_visible
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB
from backdrop.utils.geometry import intersects_or_encloses

logger = logging.getLogger(__name__)


@phase(
    order=1,
    source=BackgroundSource.SIBLING,
    description="Nearest eligible sibling stacked below the target",
)
def siblings_behind(ctx: ResolutionContext) -> RGB | None:
    parent = ctx.parent
    if parent is None:
        return None

    index = ctx.provider.sibling_index(ctx.selected)
    behind = list(parent.children[: max(index, 0)])

    for sibling in reversed(behind):
        verdict = classify(sibling)
        if verdict != Eligibility.ELIGIBLE:
            logger.debug("  sibling %s skipped: %s", sibling.name, verdict.value)
            continue
        if not is_effectively_visible(sibling):
            continue
        if intersects_or_encloses(sibling.bbox, ctx.target.bbox):
            return candidate_color(sibling)
    return None
