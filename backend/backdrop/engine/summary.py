"""Describe the selected node's own paint: what the contrast UI shows next to the background."""

from __future__ import annotations

from backdrop.engine.blend import css_blend_mode, is_supported
from backdrop.engine.provider import SceneNodeRef
from backdrop.models.responses import FillSummary, SelectionResponse
from backdrop.models.results import BackgroundResult
from backdrop.models.scene import Fill


def _primary_fill(solid: list[Fill]) -> Fill | None:
    for fill in solid:
        if fill.visible:
            return fill
    return solid[0] if solid else None


def summarize_selection(node: SceneNodeRef, background: BackgroundResult) -> SelectionResponse:
    solid = [f for f in node.fills if f.is_solid]
    primary = _primary_fill(solid)

    fill_blend = primary.blend_mode if primary is not None else None
    unsupported = not is_supported(node.blend_mode) or (
        fill_blend is not None and not is_supported(fill_blend)
    )

    # The node's own mode wins for display; otherwise the primary fill's
    css = css_blend_mode(node.blend_mode) if node.blend_mode is not None else css_blend_mode(fill_blend)

    return SelectionResponse(
        node_id=node.id,
        name=node.name,
        node_type=node.type.value,
        primary_color=primary.color.to_rgb().hex if primary is not None else None,
        opacity=primary.opacity if primary is not None else node.opacity,
        blend_mode=node.blend_mode,
        css_blend_mode=css,
        fill_blend_mode=fill_blend,
        fills=[
            FillSummary(
                hex=f.color.to_rgb().hex,
                opacity=f.opacity,
                visible=f.visible,
                blend_mode=f.blend_mode,
                css_blend_mode=css_blend_mode(f.blend_mode),
            )
            for f in solid
        ],
        has_unsupported_blend_mode=unsupported,
        background=background,
    )
