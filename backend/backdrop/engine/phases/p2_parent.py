"""Phase 2: Direct parent container."""

from __future__ import annotations

from backdrop.engine.blend import Eligibility, candidate_color, classify
from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.engine.snapshot import is_effectively_visible
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB, NodeType


@phase(
    order=2,
    source=BackgroundSource.PARENT,
    description="Immediate parent with an eligible solid fill",
)
def parent_container(ctx: ResolutionContext) -> RGB | None:
    parent = ctx.parent
    if parent is None or parent.type in (NodeType.PAGE, NodeType.DOCUMENT):
        return None
    if classify(parent) != Eligibility.ELIGIBLE or not is_effectively_visible(parent):
        return None
    return candidate_color(parent)
