"""Host scene-graph boundary.

The engine only ever talks to a ``SceneGraphProvider``. ``DocumentProvider``
is the in-memory implementation used by the API and the tests: it turns a
``SceneDocument`` into linked ``HostNode`` objects with parent references.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from backdrop.engine.blend import first_candidate_fill
from backdrop.models.scene import BBox, BlendMode, Fill, NodeType, SceneDocument, SceneNodeModel


class SceneNodeRef(Protocol):
    """Read-only view of one host node."""

    id: str
    name: str
    type: NodeType
    visible: bool
    opacity: float
    fills: Sequence[Fill]
    blend_mode: BlendMode | None
    bbox: BBox | None
    children: Sequence["SceneNodeRef"]
    parent: "SceneNodeRef | None"


class SceneGraphProvider(Protocol):
    def get_selection(self) -> SceneNodeRef | None: ...

    def get_page_children(self) -> Sequence[SceneNodeRef]: ...

    def get_page_background(self) -> Fill | None: ...

    def get_node_by_id(self, node_id: str) -> SceneNodeRef | None: ...

    def sibling_index(self, node: SceneNodeRef) -> int: ...


@dataclass(eq=False)
class HostNode:
    """Linked node built from a ``SceneNodeModel`` (or the page itself)."""

    id: str
    name: str
    type: NodeType
    visible: bool = True
    opacity: float = 1.0
    fills: tuple[Fill, ...] = ()
    blend_mode: BlendMode | None = None
    bbox: BBox | None = None
    children: list[HostNode] = field(default_factory=list)
    parent: HostNode | None = None

    def __repr__(self) -> str:
        return f"HostNode({self.id!r}, {self.type.value})"


class DocumentProvider:
    """``SceneGraphProvider`` over a parsed scene document."""

    def __init__(self, document: SceneDocument) -> None:
        self.document = document
        self.page = HostNode(
            id=document.id,
            name=document.name,
            type=NodeType.PAGE,
            fills=tuple(document.background),
        )
        self._index: dict[str, HostNode] = {self.page.id: self.page}
        self._positions: dict[str, int] = {}
        for position, child in enumerate(document.children):
            self.page.children.append(self._link(child, self.page, position))

    def _link(self, model: SceneNodeModel, parent: HostNode, position: int) -> HostNode:
        if model.id in self._index:
            raise ValueError(f"Duplicate node id in document: {model.id}")
        node = HostNode(
            id=model.id,
            name=model.name or model.id,
            type=model.type,
            visible=model.visible,
            opacity=model.opacity,
            fills=tuple(model.fills),
            blend_mode=model.blend_mode,
            bbox=model.bbox,
            parent=parent,
        )
        self._index[node.id] = node
        self._positions[node.id] = position
        for child_position, child in enumerate(model.children):
            node.children.append(self._link(child, node, child_position))
        return node

    def get_selection(self) -> HostNode | None:
        for node_id in self.document.selection:
            node = self._index.get(node_id)
            if node is not None and node is not self.page:
                return node
        return None

    def get_page_children(self) -> list[HostNode]:
        return self.page.children

    def get_page_background(self) -> Fill | None:
        return first_candidate_fill(self.page.fills)

    def get_node_by_id(self, node_id: str) -> HostNode | None:
        return self._index.get(node_id)

    def sibling_index(self, node: SceneNodeRef) -> int:
        return self._positions.get(node.id, -1)

    @property
    def node_count(self) -> int:
        return len(self._index) - 1
