"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Upstream base URL is injected into the client at construction, never mutated at runtime
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults match the local mock server, so the app starts with no .env file
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Upstream mock API
    upstream_base_url: str = "http://localhost:8112"
    upstream_timeout_seconds: float = 10.0

    @field_validator("upstream_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoint paths are joined with a leading slash."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Queries
    top_earners_count: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
