"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection details come from environment variables or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - Defaults work out-of-the-box with docker-compose (PostgreSQL service named db)
    - postgresql:// URLs rewritten for asyncpg (hosting providers hand out the plain scheme)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://hodolog:hodolog@db:5432/hodolog"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """asyncpg needs postgresql+asyncpg://, not postgresql://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
