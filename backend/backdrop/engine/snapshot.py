"""Scene snapshots: immutable copies of host nodes that the resolver works on.

A snapshot never holds a reference into the host graph: fills are copied,
the parent chain is reduced to ids, and children are only attached by the
intersection finder when it builds an ``IntersectionSet``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from backdrop.engine.cache import ResolutionCache
from backdrop.engine.errors import ParentCycleError
from backdrop.engine.provider import SceneGraphProvider, SceneNodeRef
from backdrop.models.scene import BBox, BlendMode, Fill, NodeType

_ROOT_TYPES = (NodeType.PAGE, NodeType.DOCUMENT)


@dataclass(frozen=True)
class SnapshotNode:
    id: str
    name: str
    type: NodeType
    fills: tuple[Fill, ...] = ()
    blend_mode: BlendMode = BlendMode.PASS_THROUGH
    opacity: float = 1.0
    visible: bool = True
    effectively_visible: bool = True
    bbox: BBox | None = None
    # Ancestor count up to (not including) the page
    nesting_level: int = 0
    # Position among direct siblings, bottom-most = 0; -1 when parentless
    z_index: int = -1
    is_selected: bool = False
    parent_id: str | None = None
    # Nearest ancestor first
    parent_ids: tuple[str, ...] = ()
    children: tuple[SnapshotNode, ...] = field(default=(), repr=False)

    def with_children(self, children: tuple[SnapshotNode, ...]) -> SnapshotNode:
        return replace(self, children=children)

    def walk(self) -> Iterator[SnapshotNode]:
        """Pre-order over this node's descendants (self excluded)."""
        for child in self.children:
            yield child
            yield from child.walk()


@dataclass(frozen=True)
class IntersectionSet:
    """Forest of intersecting snapshots hung under a synthetic page node."""

    root: SnapshotNode
    selected_id: str

    def ids(self) -> list[str]:
        return [n.id for n in self.root.walk()]

    def __len__(self) -> int:
        return sum(1 for _ in self.root.walk())


def ancestors(node: SceneNodeRef) -> list[SceneNodeRef]:
    """Ancestors nearest first, stopping before the page/document root.

    Raises ``ParentCycleError`` if the chain revisits a node.
    """
    chain: list[SceneNodeRef] = []
    seen = {node.id}
    current = node.parent
    while current is not None and current.type not in _ROOT_TYPES:
        if current.id in seen:
            raise ParentCycleError(node.id)
        seen.add(current.id)
        chain.append(current)
        current = current.parent
    return chain


def is_effectively_visible(node: SceneNodeRef, chain: list[SceneNodeRef] | None = None) -> bool:
    """A node is visible only if it and every ancestor are visible."""
    if not node.visible:
        return False
    chain = ancestors(node) if chain is None else chain
    return all(a.visible for a in chain)


def nesting_level(node: SceneNodeRef, cache: ResolutionCache | None = None) -> int:
    if cache is not None:
        cached = cache.get_depth(node.id)
        if cached is not None:
            return cached
    depth = len(ancestors(node))
    if cache is not None:
        cache.put_depth(node.id, depth)
    return depth


def build_snapshot(
    node: SceneNodeRef,
    provider: SceneGraphProvider,
    selected_id: str | None = None,
    cache: ResolutionCache | None = None,
) -> SnapshotNode:
    """Copy one host node into a ``SnapshotNode``. Children are not visited."""
    chain = ancestors(node)
    if cache is not None:
        cache.put_depth(node.id, len(chain))
    parent = node.parent
    return SnapshotNode(
        id=node.id,
        name=node.name,
        type=node.type,
        fills=tuple(f.model_copy() for f in node.fills),
        blend_mode=node.blend_mode or BlendMode.PASS_THROUGH,
        opacity=node.opacity,
        visible=node.visible,
        effectively_visible=is_effectively_visible(node, chain),
        bbox=node.bbox,
        nesting_level=len(chain),
        z_index=provider.sibling_index(node) if parent is not None else -1,
        is_selected=selected_id is not None and node.id == selected_id,
        parent_id=parent.id if parent is not None else None,
        parent_ids=tuple(a.id for a in chain),
    )


def build_page_snapshot(page_id: str, page_fill: Fill | None) -> SnapshotNode:
    """Synthetic root standing in for the page, carrying its background fill."""
    return SnapshotNode(
        id=page_id,
        name="page",
        type=NodeType.PAGE,
        fills=(page_fill.model_copy(),) if page_fill is not None else (),
        nesting_level=0,
    )
