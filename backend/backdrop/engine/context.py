"""ResolutionContext: the state one resolution carries through its phases.

Everything derived from the intersection finder is computed lazily: the
sibling and parent phases usually settle the answer without walking the page.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from backdrop.engine.blend import Eligibility, classify_forest, filter_candidates
from backdrop.engine.cache import ResolutionCache
from backdrop.engine.config import ResolverConfig
from backdrop.engine.intersection import find_intersecting
from backdrop.engine.ordering import flatten, sort_by_compositing_order
from backdrop.engine.provider import SceneGraphProvider, SceneNodeRef
from backdrop.engine.snapshot import IntersectionSet, SnapshotNode, build_snapshot

logger = logging.getLogger(__name__)


@dataclass
class ResolutionContext:
    provider: SceneGraphProvider
    selected: SceneNodeRef
    config: ResolverConfig = field(default_factory=ResolverConfig)
    cache: ResolutionCache | None = None

    # Snapshot of the selection itself
    target: SnapshotNode | None = None

    # --- populated by prepare_candidates() ---
    intersections: IntersectionSet | None = None
    # Every intersecting node in scan order (deepest first, then lowest index)
    ordered: list[SnapshotNode] = field(default_factory=list)
    verdicts: dict[str, Eligibility] = field(default_factory=dict)
    # ``ordered`` restricted to ELIGIBLE nodes
    candidates: list[SnapshotNode] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.target is None:
            self.target = build_snapshot(self.selected, self.provider, self.selected.id, self.cache)

    @property
    def parent(self) -> SceneNodeRef | None:
        return self.selected.parent

    @property
    def candidates_ready(self) -> bool:
        return self.intersections is not None

    def prepare_candidates(self) -> None:
        if self.candidates_ready:
            return
        self.intersections = find_intersecting(self.selected, self.provider, self.cache)
        self.ordered = sort_by_compositing_order(flatten(self.intersections.root))
        self.verdicts = classify_forest(self.intersections.root)
        self.candidates = filter_candidates(self.ordered, self.verdicts)
        logger.debug(
            "%d intersecting nodes, %d eligible for %s",
            len(self.ordered),
            len(self.candidates),
            self.selected.name,
        )
