"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from backdrop.config import settings
from backdrop.engine.resolver import BackgroundResolver


def get_settings():
    return settings


@lru_cache(maxsize=1)
def get_resolver() -> BackgroundResolver:
    """One resolver (and so one cache) per process."""
    return BackgroundResolver(config=get_settings().resolver_config())
