"""POST /api/selection: the selected node's own fills plus its resolved background."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from backdrop.api.resolve import load_provider, pick_node
from backdrop.dependencies import get_resolver
from backdrop.engine.resolver import BackgroundResolver
from backdrop.engine.summary import summarize_selection
from backdrop.models.requests import DocumentRequest
from backdrop.models.responses import SelectionResponse

router = APIRouter()


@router.post("/selection", response_model=SelectionResponse)
def selection(
    request: DocumentRequest,
    resolver: BackgroundResolver = Depends(get_resolver),
) -> SelectionResponse:
    provider = load_provider(request.document)
    node = pick_node(provider, None)
    background = resolver.resolve(node, provider)
    return summarize_selection(node, background)
