"""Blend-mode compatibility filter.

Which blend modes the resolver can reason about is a data table, not a chain
of conditionals. A node whose own mode is unsupported takes its whole subtree
out of consideration; a solid fill with an unsupported mode takes out only the
node carrying it.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from backdrop.models.scene import RGB, BlendMode, Fill

if TYPE_CHECKING:
    from backdrop.engine.snapshot import SnapshotNode

logger = logging.getLogger(__name__)


class Painted(Protocol):
    """Anything with fills and a blend mode, host node or snapshot."""

    fills: Sequence[Fill]
    blend_mode: BlendMode | None
    visible: bool
    opacity: float


@dataclass(frozen=True)
class BlendModeInfo:
    supported: bool
    css: str


BLEND_MODES: dict[BlendMode, BlendModeInfo] = {
    BlendMode.PASS_THROUGH: BlendModeInfo(True, "normal"),
    BlendMode.NORMAL: BlendModeInfo(True, "normal"),
    BlendMode.DARKEN: BlendModeInfo(True, "darken"),
    BlendMode.MULTIPLY: BlendModeInfo(True, "multiply"),
    # No CSS linear-burn / linear-dodge; nearest visual stand-ins
    BlendMode.LINEAR_BURN: BlendModeInfo(False, "multiply"),
    BlendMode.COLOR_BURN: BlendModeInfo(True, "color-burn"),
    BlendMode.LIGHTEN: BlendModeInfo(True, "lighten"),
    BlendMode.SCREEN: BlendModeInfo(True, "screen"),
    BlendMode.LINEAR_DODGE: BlendModeInfo(False, "screen"),
    BlendMode.COLOR_DODGE: BlendModeInfo(True, "color-dodge"),
    BlendMode.OVERLAY: BlendModeInfo(True, "overlay"),
    BlendMode.SOFT_LIGHT: BlendModeInfo(True, "soft-light"),
    BlendMode.HARD_LIGHT: BlendModeInfo(True, "hard-light"),
    BlendMode.DIFFERENCE: BlendModeInfo(True, "difference"),
    BlendMode.EXCLUSION: BlendModeInfo(True, "exclusion"),
    BlendMode.HUE: BlendModeInfo(True, "hue"),
    BlendMode.SATURATION: BlendModeInfo(True, "saturation"),
    BlendMode.COLOR: BlendModeInfo(True, "color"),
    BlendMode.LUMINOSITY: BlendModeInfo(True, "luminosity"),
}

_UNKNOWN = BlendModeInfo(False, "normal")


class Eligibility(str, enum.Enum):
    ELIGIBLE = "eligible"
    INELIGIBLE_BLEND = "ineligible-blend"
    NO_SOLID_FILL = "no-solid-fill"


def _info(mode: BlendMode | str | None) -> BlendModeInfo:
    if mode is None:
        return BLEND_MODES[BlendMode.NORMAL]
    try:
        return BLEND_MODES[BlendMode(mode)]
    except ValueError:
        return _UNKNOWN


def is_supported(mode: BlendMode | str | None) -> bool:
    """Missing modes count as NORMAL; modes outside the table are unsupported."""
    return _info(mode).supported


def css_blend_mode(mode: BlendMode | str | None) -> str:
    return _info(mode).css


def is_candidate_fill(fill: Fill) -> bool:
    """Visible, non-transparent, solid and blended in a way we understand."""
    return fill.is_solid and fill.visible and fill.opacity > 0 and is_supported(fill.blend_mode)


def first_candidate_fill(fills: Iterable[Fill]) -> Fill | None:
    for fill in fills:
        if is_candidate_fill(fill):
            return fill
    return None


def has_unsupported_fill(fills: Sequence[Fill]) -> bool:
    return any(
        f.is_solid and f.visible and not is_supported(f.blend_mode) for f in fills
    )


def classify(node: Painted) -> Eligibility:
    """Tri-state verdict for one node (``SnapshotNode`` or any host node)."""
    if not is_supported(node.blend_mode) or has_unsupported_fill(node.fills):
        return Eligibility.INELIGIBLE_BLEND
    if not node.visible or node.opacity <= 0:
        return Eligibility.NO_SOLID_FILL
    if first_candidate_fill(node.fills) is None:
        return Eligibility.NO_SOLID_FILL
    return Eligibility.ELIGIBLE


def classify_forest(root: SnapshotNode) -> dict[str, Eligibility]:
    """Classify every node under ``root`` (the root itself excluded).

    An unsupported node blend mode marks the node and all of its descendants
    ``INELIGIBLE_BLEND`` without classifying any of them individually.
    """
    verdicts: dict[str, Eligibility] = {}

    def _mark_subtree(node: SnapshotNode) -> None:
        verdicts[node.id] = Eligibility.INELIGIBLE_BLEND
        for child in node.children:
            _mark_subtree(child)

    def _walk(node: SnapshotNode) -> None:
        if not is_supported(node.blend_mode):
            logger.debug("Blend mode %s on %s excludes its subtree", node.blend_mode, node.name)
            _mark_subtree(node)
            return
        verdicts[node.id] = classify(node)
        for child in node.children:
            _walk(child)

    for top in root.children:
        _walk(top)
    return verdicts


def filter_candidates(
    nodes: Sequence[SnapshotNode],
    verdicts: dict[str, Eligibility],
) -> list[SnapshotNode]:
    """Keep only nodes classified ``ELIGIBLE``, preserving order."""
    return [n for n in nodes if verdicts.get(n.id) == Eligibility.ELIGIBLE]


def candidate_color(node: Painted) -> RGB | None:
    """8-bit color of the node's first candidate fill, if it has one."""
    fill = first_candidate_fill(node.fills)
    if fill is None or fill.color is None:
        return None
    return fill.color.to_rgb()
