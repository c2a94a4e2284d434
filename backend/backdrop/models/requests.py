"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from backdrop.models.scene import SceneDocument


class DocumentRequest(BaseModel):
    document: SceneDocument = Field(..., description="Page snapshot from the host")


class ResolveRequest(DocumentRequest):
    node_id: str | None = Field(
        default=None,
        description="Node to resolve; defaults to the document's first selected node",
    )
