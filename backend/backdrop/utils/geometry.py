"""Leaf-node bounding-box predicates. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from backdrop.models.scene import BBox


def has_area(box: BBox | None) -> bool:
    """False for detached nodes (no box) and zero/negative-size boxes."""
    return box is not None and box.width > 0 and box.height > 0


def intersects(a: BBox | None, b: BBox | None) -> bool:
    """Strict overlap on both axes. Touching edges do not count."""
    if not has_area(a) or not has_area(b):
        return False
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def contains(outer: BBox | None, inner: BBox | None) -> bool:
    """All four edges of ``inner`` lie within ``outer`` (inclusive)."""
    if not has_area(outer) or not has_area(inner):
        return False
    return (
        inner.x >= outer.x
        and inner.y >= outer.y
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def intersects_or_encloses(a: BBox | None, b: BBox | None) -> bool:
    """True if ``a`` overlaps ``b`` or fully encloses it."""
    return intersects(a, b) or contains(a, b)


def box_array(boxes: Sequence[BBox | None]) -> NDArray[np.float64]:
    """Nx4 array of (xmin, ymin, xmax, ymax). Missing/empty boxes become NaN rows."""
    arr = np.full((len(boxes), 4), np.nan, dtype=np.float64)
    for i, box in enumerate(boxes):
        if has_area(box):
            arr[i] = (box.x, box.y, box.right, box.bottom)
    return arr


def overlap_mask(boxes: Sequence[BBox | None], target: BBox | None) -> NDArray[np.bool_]:
    """Vectorized ``intersects(box, target)`` for every box in ``boxes``."""
    if not boxes or not has_area(target):
        return np.zeros(len(boxes), dtype=bool)
    arr = box_array(boxes)
    # NaN comparisons are False, so missing boxes drop out on their own
    with np.errstate(invalid="ignore"):
        return (
            (arr[:, 0] < target.right)
            & (arr[:, 2] > target.x)
            & (arr[:, 1] < target.bottom)
            & (arr[:, 3] > target.y)
        )
