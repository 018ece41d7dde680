# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The configuration center that reads settings like the database address and the port
# to listen on from environment variables and hands them to the rest of the billing service.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.infrastructure.database.connection (engine configuration)
# - app.shared.utils.logging (log level and format)

from functools import lru_cache
from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Subscription Billing API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Subscription billing records and monthly revenue summaries",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format (json/text)")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    HTTP_PORT: int = Field(default=8080, description="Server port")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: str = Field(..., description="PostgreSQL connection URL")

    # Connection Pool Settings
    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")
    DB_COMMAND_TIMEOUT: float = Field(default=30.0, description="Per-statement timeout (seconds)")

    # Startup connection retries
    DB_CONNECT_ATTEMPTS: int = Field(default=5, ge=1, description="Connection attempts at startup")
    DB_CONNECT_BACKOFF_SECONDS: float = Field(
        default=1.0,
        ge=0,
        description="Backoff step between startup attempts (attempt n waits n * step)"
    )
    DB_AUTO_CREATE_SCHEMA: bool = Field(
        default=False,
        description="Create the subscriptions table from ORM metadata on startup"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Reject blank database URLs; an empty env var counts as missing."""
        if not v.strip():
            raise ValueError("DATABASE_URL is required")
        return v.strip()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """
        Get the database URL in async driver form.

        Plain ``postgres://`` and ``postgresql://`` URLs are rewritten to
        ``postgresql+asyncpg://``; URLs that already name a driver pass through.
        """
        url = self.DATABASE_URL
        for prefix in ("postgres://", "postgresql://"):
            if url.startswith(prefix):
                return "postgresql+asyncpg://" + url[len(prefix):]
        return url

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"

    def get_engine_config(self) -> Dict[str, Any]:
        """Get SQLAlchemy engine keyword arguments for the configured database."""
        if self.is_sqlite:
            return {"echo": self.DEBUG}

        return {
            "echo": self.DEBUG and self.is_development,
            "pool_pre_ping": True,  # Verify connections before use
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_timeout": self.DB_POOL_TIMEOUT,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "connect_args": {
                "server_settings": {
                    "application_name": f"subscription_billing_{self.ENVIRONMENT}",
                    "timezone": "UTC",
                    "jit": "off",
                },
                "command_timeout": self.DB_COMMAND_TIMEOUT,
            },
        }


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
