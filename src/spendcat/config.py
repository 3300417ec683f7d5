"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``SPENDCAT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SPENDCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Optional JSON snapshot preloaded into the in-memory stores
    seed_file: Path | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
