"""POST /api/resolve and /api/page-background: background resolution endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from backdrop.dependencies import get_resolver
from backdrop.engine.provider import DocumentProvider, SceneNodeRef
from backdrop.engine.resolver import BackgroundResolver
from backdrop.models.requests import DocumentRequest, ResolveRequest
from backdrop.models.responses import PageBackgroundResponse, ResolveResponse
from backdrop.models.results import BackgroundSource
from backdrop.models.scene import RGB, SceneDocument

router = APIRouter()


def load_provider(document: SceneDocument) -> DocumentProvider:
    try:
        return DocumentProvider(document)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def pick_node(provider: DocumentProvider, node_id: str | None) -> SceneNodeRef:
    if node_id is None:
        node = provider.get_selection()
        if node is None:
            raise HTTPException(status_code=404, detail="Nothing is selected")
        return node
    node = provider.get_node_by_id(node_id)
    if node is None or node is provider.page:
        raise HTTPException(status_code=404, detail=f"Unknown node: {node_id}")
    return node


@router.post("/resolve", response_model=ResolveResponse)
def resolve(
    request: ResolveRequest,
    resolver: BackgroundResolver = Depends(get_resolver),
) -> ResolveResponse:
    start = time.perf_counter()
    provider = load_provider(request.document)
    node = pick_node(provider, request.node_id)
    background = resolver.resolve(node, provider)
    return ResolveResponse(
        node_id=node.id,
        background=background,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 2),
    )


@router.post("/page-background", response_model=PageBackgroundResponse)
def page_background(
    request: DocumentRequest,
    resolver: BackgroundResolver = Depends(get_resolver),
) -> PageBackgroundResponse:
    provider = load_provider(request.document)
    fill = provider.get_page_background()
    if fill is not None:
        color, source = fill.color.to_rgb(), BackgroundSource.PAGE
    else:
        color, source = RGB.from_hex(resolver.config.fallback_color), BackgroundSource.FALLBACK
    return PageBackgroundResponse(color=color, hex=color.hex, source=source)
