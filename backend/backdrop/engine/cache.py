"""Resolution cache: short-TTL memoization owned by one resolver.

Two maps keyed by node id: intersection sets (per selected node) and document
nesting depths. Both are dropped together when the TTL lapses or when the
active selection changes. Purely a performance aid; a cached intersection set
that references nodes no longer in the host graph is treated as a miss.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from backdrop.engine.provider import SceneGraphProvider
    from backdrop.engine.snapshot import IntersectionSet

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5.0


class ResolutionCache:
    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._intersections: dict[str, IntersectionSet] = {}
        self._depths: dict[str, int] = {}
        self._last_reset = clock()
        self._selection_id: str | None = None
        self.hits = 0
        self.misses = 0

    def clear(self) -> None:
        self._intersections.clear()
        self._depths.clear()
        self._last_reset = self._clock()

    def expire_if_needed(self) -> bool:
        """Clear both maps if the TTL has elapsed. Returns True when cleared."""
        if self._clock() - self._last_reset > self.ttl_seconds:
            logger.debug("Resolution cache TTL elapsed, clearing")
            self.clear()
            return True
        return False

    def on_selection_change(self, node_id: str | None) -> None:
        if node_id != self._selection_id:
            if self._selection_id is not None:
                logger.debug("Selection changed %s -> %s, clearing cache", self._selection_id, node_id)
            self._selection_id = node_id
            self.clear()

    # --- intersection sets ---

    def get_intersections(
        self, node_id: str, provider: SceneGraphProvider
    ) -> IntersectionSet | None:
        self.expire_if_needed()
        cached = self._intersections.get(node_id)
        if cached is None:
            self.misses += 1
            return None
        if any(provider.get_node_by_id(i) is None for i in cached.ids()):
            logger.debug("Cached intersections for %s reference deleted nodes", node_id)
            del self._intersections[node_id]
            self.misses += 1
            return None
        self.hits += 1
        return cached

    def put_intersections(self, node_id: str, result: IntersectionSet) -> None:
        self._intersections[node_id] = result

    # --- nesting depths ---

    def get_depth(self, node_id: str) -> int | None:
        self.expire_if_needed()
        return self._depths.get(node_id)

    def put_depth(self, node_id: str, depth: int) -> None:
        self._depths[node_id] = depth

    def __len__(self) -> int:
        return len(self._intersections) + len(self._depths)
