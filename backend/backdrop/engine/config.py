"""Resolver configuration: tuning knobs for one ``BackgroundResolver``."""

from __future__ import annotations

from dataclasses import dataclass

from backdrop.models.scene import RGB


@dataclass
class ResolverConfig:
    """Controls caching and the bounded parts of the fallback chain."""

    # Wall-clock lifetime of cached intersection sets and depths
    cache_ttl_seconds: float = 5.0

    # Ancestor levels walked above each intersecting node (phase 4)
    ancestor_depth_limit: int = 3

    # Terminal color when nothing else qualifies
    fallback_color: str = "#1E1E1E"

    def __post_init__(self) -> None:
        # Fail at construction rather than mid-resolution
        RGB.from_hex(self.fallback_color)
        if self.ancestor_depth_limit < 0:
            raise ValueError("ancestor_depth_limit must be >= 0")
