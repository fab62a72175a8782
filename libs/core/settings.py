"""Application settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the application."""

    # Remote endpoint returning the whole catalog as a JSON array.
    catalog_url: str = Field(default="")
    # Optional local JSON dump (env: CATALOG_PATH). Takes precedence over
    # CATALOG_URL when set, handy for offline development.
    catalog_path: Optional[Path] = Field(default=None)
    catalog_timeout: float = Field(default=30.0)
    search_default_limit: int = Field(default=20)
    search_max_limit: int = Field(default=500)
    public_url: str = Field(default="https://fdr-finder.tommyvolk.com")
    service_name: str = Field(default="fdr-finder")
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Allow environment variables that don't have a matching field.
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return application settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
