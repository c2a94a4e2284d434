"""Tests for the phase registry."""

import pytest

from backdrop.engine.context import ResolutionContext
from backdrop.engine.registry import PhaseRegistry, PhaseSpec, get_registry
from backdrop.engine.resolver import BackgroundResolver  # noqa: F401  (registers the phases)
from backdrop.models.results import BackgroundSource


def _noop(ctx: ResolutionContext) -> None:
    return None


def test_register_and_get():
    reg = PhaseRegistry()
    spec = PhaseSpec(order=1, source=BackgroundSource.SIBLING, fn=_noop)
    reg.register(spec)
    assert reg.get(1) is spec
    assert reg.count == 1


def test_duplicate_order_is_rejected():
    reg = PhaseRegistry()
    reg.register(PhaseSpec(order=2, source=BackgroundSource.PARENT, fn=_noop))
    with pytest.raises(ValueError):
        reg.register(PhaseSpec(order=2, source=BackgroundSource.PAGE, fn=_noop))


def test_all_is_sorted_by_order():
    reg = PhaseRegistry()
    for order in (5, 1, 3):
        reg.register(PhaseSpec(order=order, source=BackgroundSource.PAGE, fn=_noop))
    assert [s.order for s in reg.all()] == [1, 3, 5]


def test_requirements():
    spec = PhaseSpec(order=3, source=BackgroundSource.INTERSECTING_NODE, fn=_noop, requires={"candidates"})
    assert spec.needs_candidates
    assert not PhaseSpec(order=1, source=BackgroundSource.SIBLING, fn=_noop).needs_candidates


def test_global_registry_holds_the_six_phases():
    reg = get_registry()
    assert reg.count == 6
    assert [s.source for s in reg.all()] == [
        BackgroundSource.SIBLING,
        BackgroundSource.PARENT,
        BackgroundSource.INTERSECTING_NODE,
        BackgroundSource.ANCESTOR,
        BackgroundSource.PAGE,
        BackgroundSource.FALLBACK,
    ]
    assert [s.order for s in reg.all() if s.needs_candidates] == [3, 4, 5]
