"""Background resolver: runs the fallback chain for one selection at a time."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

import backdrop.engine.phases  # noqa: F401  (registers the phases)
from backdrop.engine.cache import ResolutionCache
from backdrop.engine.config import ResolverConfig
from backdrop.engine.context import ResolutionContext
from backdrop.engine.errors import ResolutionError
from backdrop.engine.provider import SceneGraphProvider, SceneNodeRef
from backdrop.engine.registry import PhaseRegistry, get_registry
from backdrop.models.results import BackgroundResult, BackgroundSource
from backdrop.models.scene import RGB

logger = logging.getLogger(__name__)

FALLBACK_PHASE = 6


@dataclass(frozen=True)
class PhaseReport:
    """Diagnostic record of one attempted phase."""

    phase: int
    source: BackgroundSource
    matched: bool
    elapsed_ms: float
    color: RGB | None = None


class BackgroundResolver:
    """Resolves the effective background of a node. ``resolve`` never raises."""

    def __init__(
        self,
        config: ResolverConfig | None = None,
        registry: PhaseRegistry | None = None,
        cache: ResolutionCache | None = None,
        on_phase: Callable[[PhaseReport], None] | None = None,
    ) -> None:
        self.config = config or ResolverConfig()
        self.registry = registry or get_registry()
        self.cache = cache if cache is not None else ResolutionCache(self.config.cache_ttl_seconds)
        self.on_phase = on_phase
        self._lock = threading.Lock()
        self._provider: SceneGraphProvider | None = None

    def notify_selection(self, node_id: str | None) -> None:
        """Tell the resolver the host selection changed; drops cached state."""
        with self._lock:
            self.cache.on_selection_change(node_id)

    def resolve(self, node: SceneNodeRef, provider: SceneGraphProvider) -> BackgroundResult:
        with self._lock:
            start = time.perf_counter()
            # Cached ids mean nothing against another scene graph
            if provider is not self._provider:
                if self._provider is not None:
                    self.cache.clear()
                self._provider = provider
            self.cache.on_selection_change(node.id)
            self.cache.expire_if_needed()

            try:
                result = self._run_chain(node, provider)
            except ResolutionError as e:
                logger.warning("Resolution of %s aborted: %s", node.id, e)
                result = self._fallback()
            except Exception:
                logger.exception("Unexpected error resolving background of %s", node.id)
                result = self._fallback()

            logger.info(
                "Background of %s: %s from %s (phase %d) in %.1fms",
                node.name,
                result.color.hex,
                result.source.value,
                result.phase,
                (time.perf_counter() - start) * 1000,
            )
            return result

    def _run_chain(self, node: SceneNodeRef, provider: SceneGraphProvider) -> BackgroundResult:
        ctx = ResolutionContext(provider=provider, selected=node, config=self.config, cache=self.cache)

        for spec in self.registry.all():
            t0 = time.perf_counter()
            if spec.needs_candidates:
                ctx.prepare_candidates()
            color = spec.fn(ctx)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug(
                "  phase %d (%s) %s in %.1fms",
                spec.order,
                spec.source.value,
                "matched" if color is not None else "no match",
                elapsed,
            )
            if self.on_phase is not None:
                self.on_phase(
                    PhaseReport(
                        phase=spec.order,
                        source=spec.source,
                        matched=color is not None,
                        elapsed_ms=round(elapsed, 3),
                        color=color,
                    )
                )
            if color is not None:
                return BackgroundResult(color=color, source=spec.source, phase=spec.order)

        return self._fallback()

    def _fallback(self) -> BackgroundResult:
        return BackgroundResult(
            color=RGB.from_hex(self.config.fallback_color),
            source=BackgroundSource.FALLBACK,
            phase=FALLBACK_PHASE,
        )


def resolve_background(
    node: SceneNodeRef,
    provider: SceneGraphProvider,
    resolver: BackgroundResolver | None = None,
) -> BackgroundResult:
    """Resolve ``node``'s background; without a resolver, a one-off uncached run."""
    if resolver is None:
        resolver = BackgroundResolver()
    return resolver.resolve(node, provider)
