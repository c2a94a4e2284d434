"""Tests for the bounding-box predicates."""

from __future__ import annotations

import numpy as np

from backdrop.models.scene import BBox
from backdrop.utils.geometry import (
    contains,
    has_area,
    intersects,
    intersects_or_encloses,
    overlap_mask,
)


def box(x, y, w, h) -> BBox:
    return BBox(x=x, y=y, width=w, height=h)


def test_overlapping_boxes_intersect():
    assert intersects(box(0, 0, 100, 100), box(50, 50, 100, 100))
    assert intersects(box(50, 50, 100, 100), box(0, 0, 100, 100))


def test_touching_edges_do_not_intersect():
    assert not intersects(box(0, 0, 100, 100), box(100, 0, 50, 50))
    assert not intersects(box(0, 0, 100, 100), box(0, 100, 50, 50))


def test_disjoint_boxes():
    assert not intersects(box(0, 0, 10, 10), box(20, 20, 10, 10))


def test_missing_or_empty_geometry_never_intersects():
    assert not intersects(None, box(0, 0, 10, 10))
    assert not intersects(box(0, 0, 10, 10), None)
    assert not intersects(box(0, 0, 0, 10), box(0, 0, 10, 10))
    assert not has_area(box(5, 5, 10, 0))


def test_contains_is_inclusive():
    outer = box(0, 0, 100, 100)
    assert contains(outer, box(0, 0, 100, 100))
    assert contains(outer, box(10, 10, 20, 20))
    assert not contains(outer, box(90, 90, 20, 20))
    assert not contains(box(10, 10, 20, 20), outer)
    assert not contains(None, outer)


def test_intersects_or_encloses():
    assert intersects_or_encloses(box(0, 0, 100, 100), box(10, 10, 5, 5))
    assert intersects_or_encloses(box(0, 0, 100, 100), box(90, 90, 50, 50))
    assert not intersects_or_encloses(box(0, 0, 10, 10), box(50, 50, 5, 5))


def test_overlap_mask_matches_scalar_predicate():
    target = box(50, 50, 100, 100)
    boxes = [
        box(0, 0, 100, 100),
        None,
        box(150, 0, 10, 10),
        box(60, 60, 10, 10),
        box(0, 0, 0, 0),
        box(149, 149, 5, 5),
    ]
    mask = overlap_mask(boxes, target)
    assert mask.dtype == np.bool_
    assert list(mask) == [intersects(b, target) for b in boxes]
    assert list(mask) == [True, False, False, True, False, True]


def test_overlap_mask_without_target_or_boxes():
    assert len(overlap_mask([], box(0, 0, 1, 1))) == 0
    assert not overlap_mask([box(0, 0, 10, 10)], None).any()
