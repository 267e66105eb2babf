"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    food_cache_ttl_seconds: int = 86400
    template_cache_ttl_seconds: int = 3600
    catalog_retry_attempts: int = 1
    planner_seed: int | None = None
    debug: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_tag_list(raw: str | None) -> list[str]:
    """Parse a comma separated list of tags or names."""
    if raw is None:
        return []
    tags: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in tags:
            tags.append(value)
    return tags
