# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Required values are validated when Settings is built, so a missing or blank
# variable aborts startup instead of failing on the first request.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The CORS origin and the four database connection values are required;
    everything else has a development default.
    """

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    ALLOWED_ORIGIN: str = Field(..., description="Origin of the web client allowed by the CORS policy")

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    DB_SERVER: str = Field(..., description="Database host name")
    DB_NAME: str = Field(..., description="Database name")
    DB_USER: str = Field(..., description="Database user")
    DB_PASSWORD: SecretStr = Field(..., description="Database password")

    DB_PORT: int = Field(default=5432, ge=1, le=65535, description="Database port")
    DB_DRIVER: str = Field(default="postgresql+asyncpg", description="SQLAlchemy async driver name")

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development", description="Current environment"
    )

    DEBUG: bool = Field(default=False, description="Enable debug logging and SQL echo")

    SEED_DEFAULT_CATEGORIES: bool = Field(
        default=True, description="Insert the system-wide default categories on startup"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty variables count as missing, so required fields fail fast
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ALLOWED_ORIGIN", "DB_SERVER", "DB_NAME", "DB_USER")
    @classmethod
    def _not_blank(cls, value: str, info) -> str:
        value = value.strip()
        if not value:
            raise ValueError(f"{info.field_name} is not set or is empty.")
        return value

    @field_validator("DB_PASSWORD")
    @classmethod
    def _password_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("DB_PASSWORD is not set or is empty.")
        return value

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def database_url(self) -> URL:
        """
        SQLAlchemy URL for the configured database.

        A URL object renders the password masked when logged or printed.
        """
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD.get_secret_value(),
            host=self.DB_SERVER,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Raises pydantic.ValidationError when a required variable is missing or blank.
    """
    return Settings()
