"""Backdrop effective-background resolution engine."""

from backdrop.engine.cache import ResolutionCache
from backdrop.engine.config import ResolverConfig
from backdrop.engine.provider import DocumentProvider, SceneGraphProvider, SceneNodeRef
from backdrop.engine.registry import get_registry, phase
from backdrop.engine.resolver import BackgroundResolver, PhaseReport, resolve_background

__all__ = [
    "BackgroundResolver",
    "DocumentProvider",
    "PhaseReport",
    "ResolutionCache",
    "ResolverConfig",
    "SceneGraphProvider",
    "SceneNodeRef",
    "get_registry",
    "phase",
    "resolve_background",
]
