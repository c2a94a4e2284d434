"""Phase registry: every step of the fallback chain is a function registered via decorator.

Usage:
    @phase(order=2, source=BackgroundSource.PARENT, description="Direct parent container")
    def parent_container(ctx: ResolutionContext) -> RGB | None:
        ...

A phase returns the background color it found, or None to hand over to the
next phase. Phases run in ``order``; the first color wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from backdrop.models.results import BackgroundSource

if TYPE_CHECKING:
    from backdrop.engine.context import ResolutionContext
    from backdrop.models.scene import RGB

logger = logging.getLogger(__name__)

PhaseFn = Callable[["ResolutionContext"], "RGB | None"]


@dataclass
class PhaseSpec:
    order: int
    source: BackgroundSource
    fn: PhaseFn
    # "candidates": needs the intersection set prepared first
    requires: set[str] = field(default_factory=set)
    description: str = ""

    @property
    def needs_candidates(self) -> bool:
        return "candidates" in self.requires


class PhaseRegistry:
    def __init__(self) -> None:
        self._phases: dict[int, PhaseSpec] = {}

    def register(self, spec: PhaseSpec) -> None:
        if spec.order in self._phases:
            raise ValueError(f"Duplicate phase order: {spec.order}")
        self._phases[spec.order] = spec
        logger.debug("Registered phase %d (%s)", spec.order, spec.source.value)

    def get(self, order: int) -> PhaseSpec:
        return self._phases[order]

    def all(self) -> list[PhaseSpec]:
        return [self._phases[k] for k in sorted(self._phases)]

    @property
    def count(self) -> int:
        return len(self._phases)


# Module-level singleton
_registry = PhaseRegistry()


def get_registry() -> PhaseRegistry:
    return _registry


def phase(
    *,
    order: int,
    source: BackgroundSource,
    requires: set[str] | None = None,
    description: str = "",
):
    """Decorator to register a phase function."""

    def decorator(fn: PhaseFn) -> PhaseFn:
        _registry.register(
            PhaseSpec(
                order=order,
                source=source,
                fn=fn,
                requires=requires or set(),
                description=description,
            )
        )
        return fn

    return decorator
