"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Missing DATABASE_URL / RESEND_API_KEY never crash startup; the routes
      that need them report the gap instead

Design Decisions:
    - database_url accepts the plain postgresql:// string the hosted
      Postgres dashboard hands out and rewrites it for asyncpg
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    environment: str = "unknown"

    # Hosted Postgres
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if isinstance(v, str) and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 5
    database_max_overflow: int = 5

    # Resend
    resend_api_key: str | None = None
    resend_from_email: str = "onboarding@resend.dev"
    resend_base_url: str = "https://api.resend.com"
    resend_timeout_seconds: float = 10.0

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def database_configured(self) -> bool:
        return bool(self.database_url)

    @property
    def email_configured(self) -> bool:
        return bool(self.resend_api_key)


@lru_cache
def get_settings() -> Settings:
    return Settings()
