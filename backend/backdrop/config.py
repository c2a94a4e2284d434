"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from backdrop.engine.config import ResolverConfig


class Settings(BaseSettings):
    backdrop_env: str = "development"
    backdrop_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Resolver tuning
    cache_ttl_seconds: float = 5.0
    ancestor_depth_limit: int = 3
    fallback_color: str = "#1E1E1E"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def resolver_config(self) -> ResolverConfig:
        return ResolverConfig(
            cache_ttl_seconds=self.cache_ttl_seconds,
            ancestor_depth_limit=self.ancestor_depth_limit,
            fallback_color=self.fallback_color,
        )


settings = Settings()
