"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: Literal["development", "production", "test"] = "development"

    # Database
    database_url: str = (
        "postgresql+asyncpg://participation:participation@db:5432/participation"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_retry_delay_seconds: float = 5.0

    # API
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = [
        "http://localhost:3000", "http://localhost:5173",
    ]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def graphiql(self) -> bool:
        """GraphiQL IDE is served everywhere except production."""
        return self.environment != "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
