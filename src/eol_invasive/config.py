"""
Runtime configuration.

Values come from ``EOL_*`` environment variables or a local ``.env`` file and
are resolved once at the public entry points, then passed down explicitly.

    EOL_API_KEY=...        # optional, sent as ``key`` when present
    EOL_BASE_URL=https://eol.org
    EOL_PER_PAGE=500
    EOL_TIMEOUT=30
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """EOL client settings."""

    model_config = SettingsConfigDict(
        env_prefix="EOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="EOL API key (pass-through only)")
    base_url: str = Field(default="https://eol.org", description="EOL host, no trailing slash")
    per_page: int = Field(default=500, gt=0, description="Collection items per request")
    timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read from the environment on first use."""
    return Settings()
