"""Phase 5: Page background."""

from __future__ import annotations

from backdrop.engine.blend import candidate_color
from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB


@phase(
    order=5,
    source=BackgroundSource.PAGE,
    requires={"candidates"},
    description="The page's own solid background",
)
def page_background(ctx: ResolutionContext) -> RGB | None:
    return candidate_color(ctx.intersections.root)
