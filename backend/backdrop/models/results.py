"""Resolution result models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from backdrop.models.scene import RGB


class BackgroundSource(str, enum.Enum):
    SIBLING = "sibling"
    PARENT = "parent"
    INTERSECTING_NODE = "intersecting-node"
    ANCESTOR = "ancestor"
    PAGE = "page"
    FALLBACK = "fallback"


class BackgroundResult(BaseModel):
    """The solid color sitting behind a node.

    ``source`` and ``phase`` say which step of the fallback chain produced the
    color. They are diagnostics; nothing should branch on them.
    """

    model_config = ConfigDict(frozen=True)

    color: RGB
    source: BackgroundSource
    phase: int = Field(ge=1, le=6)

    @property
    def hex(self) -> str:
        return self.color.hex
