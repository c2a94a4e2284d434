"""Phase 6: Fixed fallback. Always answers."""

from __future__ import annotations

from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import phase
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB


@phase(
    order=6,
    source=BackgroundSource.FALLBACK,
    description="Constant dark default",
)
def fixed_fallback(ctx: ResolutionContext) -> RGB | None:
    return RGB.from_hex(ctx.config.fallback_color)
