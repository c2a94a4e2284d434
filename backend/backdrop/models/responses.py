"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from backdrop.models.results import BackgroundResult, BackgroundSource
from backdrop.models.scene import RGB, BlendMode


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    phases_registered: int = 0


class BlendModeEntry(BaseModel):
    mode: BlendMode
    supported: bool
    css: str


class ResolveResponse(BaseModel):
    node_id: str
    background: BackgroundResult
    processing_time_ms: float = 0.0


class PageBackgroundResponse(BaseModel):
    color: RGB
    hex: str
    source: BackgroundSource


class FillSummary(BaseModel):
    hex: str
    opacity: float = 1.0
    visible: bool = True
    blend_mode: BlendMode = BlendMode.NORMAL
    css_blend_mode: str = "normal"


class SelectionResponse(BaseModel):
    node_id: str
    name: str
    node_type: str
    # First visible solid fill, falling back to the first solid fill
    primary_color: str | None = None
    opacity: float = 1.0
    blend_mode: BlendMode | None = None
    css_blend_mode: str = "normal"
    fill_blend_mode: BlendMode | None = None
    fills: list[FillSummary] = Field(default_factory=list)
    has_unsupported_blend_mode: bool = False
    background: BackgroundResult
