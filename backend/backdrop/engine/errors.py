"""Resolution exceptions.

Missing geometry, unsupported blend modes and nodes without a usable fill are
ordinary outcomes (see ``Eligibility``), not exceptions. What lives here are
broken invariants of the host graph, which abort a single resolution into the
fixed fallback color.
"""

from __future__ import annotations


class ResolutionError(Exception):
    """Base class for invariant violations found while resolving a background."""


class ParentCycleError(ResolutionError):
    def __init__(self, node_id: str) -> None:
        super().__init__(f"Parent chain of node {node_id} loops back on itself")
        self.node_id = node_id
