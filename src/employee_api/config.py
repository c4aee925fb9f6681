"""Application configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# URL prefixes mapped to their async driver
ASYNC_DRIVERS = {
    "sqlite://": "sqlite+aiosqlite://",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Employee Records API"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Database: a local SQLite file or a remote PostgreSQL endpoint
    database_url: str = Field(
        default="sqlite:///./local.db",
        description="Database connection URL (sqlite:/// file or postgresql://)",
    )
    database_pool_size: int = 5
    database_max_overflow: int = 10
    auto_create_tables: bool = True

    # CORS settings
    cors_origins: str = "http://localhost:3000"  # Comma-separated list

    # Rate limiting (requests per minute per client)
    rate_limit_enabled: bool = True
    rate_limit_write: int = Field(default=60, ge=1)

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings for deployment requirements."""
        if self.environment == "production" and self.debug:
            raise ValueError(
                "DEBUG mode cannot be enabled in production environment. "
                "This would expose API documentation and detailed error messages."
            )

        if not self.database_url.startswith(tuple(ASYNC_DRIVERS) + tuple(ASYNC_DRIVERS.values())):
            raise ValueError(
                "DATABASE_URL must be a SQLite URL ('sqlite:///path.db') "
                "or a PostgreSQL URL ('postgresql://...')"
            )

        if self.environment == "production" and self.is_sqlite:
            raise ValueError("DATABASE_URL must point to PostgreSQL in production")

        if "*" in self.cors_origins_list:
            raise ValueError(
                "CORS_ORIGINS cannot contain '*' wildcard. Specify explicit origins."
            )

        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured target is a local SQLite database."""
        return self.database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """Get database URL with the async driver SQLAlchemy needs.

        - sqlite:///local.db -> sqlite+aiosqlite:///local.db
        - postgresql://... -> postgresql+asyncpg://... (sslmode converted to ssl)
        """
        url = self.database_url
        for prefix, async_prefix in ASYNC_DRIVERS.items():
            if url.startswith(prefix):
                url = async_prefix + url[len(prefix):]
                break
        if url.startswith("postgresql+asyncpg://"):
            url = url.replace("sslmode=", "ssl=")
        return url

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
