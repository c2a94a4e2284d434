"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from backdrop.engine.blend import BLEND_MODES
from backdrop.engine.registry import get_registry
from backdrop.models.responses import BlendModeEntry, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        phases_registered=get_registry().count,
    )


@router.get("/blend-modes", response_model=list[BlendModeEntry])
async def blend_modes() -> list[BlendModeEntry]:
    return [
        BlendModeEntry(mode=mode, supported=info.supported, css=info.css)
        for mode, info in BLEND_MODES.items()
    ]
