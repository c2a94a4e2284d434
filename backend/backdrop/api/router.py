"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from backdrop.api import health, resolve, selection

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(resolve.router)
api_router.include_router(selection.router)
