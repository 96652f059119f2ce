"""Application configuration."""

import os
from collections.abc import Iterable

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    catalog_path: str | None = None
    strict_aliases: bool = False
    search_limit: int = Field(default=20, ge=1, le=20)
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_store: bool = False
    ai_cache_ttl_seconds: int = Field(default=3600, ge=0)

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_dietary_restrictions(raw: str | Iterable[str] | None) -> list[str]:
    """Parse dietary restrictions given as CSV and/or repeated values."""
    if raw is None:
        return []
    values = [raw] if isinstance(raw, str) else list(raw)
    restrictions: list[str] = []
    for value in values:
        for chunk in str(value).split(","):
            cleaned = chunk.strip()
            if cleaned and cleaned not in restrictions:
                restrictions.append(cleaned)
    return restrictions
