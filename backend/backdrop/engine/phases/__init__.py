"""Fallback-chain phases. Importing this package registers all six."""

from backdrop.engine.phases import (  # noqa: F401
    p1_siblings,
    p2_parent,
    p3_intersecting,
    p4_ancestors,
    p5_page,
    p6_fallback,
)
