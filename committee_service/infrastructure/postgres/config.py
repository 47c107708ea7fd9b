#committee_service\infrastructure\postgres\config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # PostgreSQL connection (NO DEFAULTS)
    postgres_user: str
    postgres_password: str
    postgres_host: str
    postgres_port: int
    postgres_db: str

    # Full URL wins over the postgres_* parts when set
    database_url_override: Optional[str] = None

    # Connection pool
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600

    # SQLAlchemy
    echo_sql: bool = False

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"


@lru_cache
def get_settings() -> DatabaseSettings:
    """Load database settings on first use."""
    return DatabaseSettings()


@lru_cache
def get_api_settings() -> ApiSettings:
    return ApiSettings()
