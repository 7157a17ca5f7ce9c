# =============================================================================
# app/config.py - Process Settings
# =============================================================================
# This module loads process-level settings from environment variables using
# pydantic-settings. It provides a single Settings class.
#
# Usage:
#   from app.config import settings
#   print(settings.PORT)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Settings also feed the startup configuration: to_partial_config() turns the
# DATABASE_* / JWT_* / CORS_ORIGINS variables into the partial dict consumed
# by core.config_validator.validate_config().
# =============================================================================

import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are accessed via the global `settings` instance.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="localhost",
        description="Host to bind the API server to"
    )

    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    LOG_LEVEL: Literal["error", "warn", "info", "debug"] = Field(
        default="info",
        description="Log level name"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    # -------------------------------------------------------------------------
    # Startup configuration inputs
    # -------------------------------------------------------------------------
    # Unset values are left out of the partial config so defaults apply

    DATABASE_HOST: str | None = None
    DATABASE_PORT: int = Field(default=5432, ge=1, le=65535)
    DATABASE_NAME: str | None = None
    DATABASE_USER: str | None = None
    DATABASE_PASSWORD: str | None = None
    DATABASE_SSL: bool | None = None

    JWT_SECRET: str | None = Field(
        default=None,
        description="Token signing secret (must not be the placeholder)"
    )

    JWT_EXPIRES_IN: str = Field(
        default="24h",
        description="Token lifetime"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str | None = Field(
        default=None,
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        if not self.CORS_ORIGINS:
            return []
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def log_level_number(self) -> int:
        """Numeric level for the logging module ("warn" -> WARNING)."""
        if self.DEBUG:
            return logging.DEBUG
        return {
            "error": logging.ERROR,
            "warn": logging.WARNING,
            "info": logging.INFO,
            "debug": logging.DEBUG,
        }[self.LOG_LEVEL]

    def to_partial_config(self) -> dict[str, Any]:
        """
        Build the partial application config from environment settings.

        Only blocks whose inputs are present are included, so anything left
        unset falls back to the compiled-in defaults (or fails validation,
        for the database block).
        """
        partial: dict[str, Any] = {
            "environment": self.ENVIRONMENT,
            "logLevel": self.LOG_LEVEL,
        }

        if self.DATABASE_HOST:
            partial["database"] = {
                "host": self.DATABASE_HOST,
                "port": self.DATABASE_PORT,
                "database": self.DATABASE_NAME,
                "username": self.DATABASE_USER,
                "password": self.DATABASE_PASSWORD,
                "ssl": self.DATABASE_SSL,
            }

        if self.JWT_SECRET is not None:
            partial["auth"] = {
                "jwtSecret": self.JWT_SECRET,
                "jwtExpiresIn": self.JWT_EXPIRES_IN,
            }

        # A whole api block replaces the default one, so carry the bind address too
        if self.cors_origins_list:
            partial["api"] = {
                "port": self.PORT,
                "host": self.HOST,
                "cors": {"origin": self.cors_origins_list, "credentials": True},
            }

        return partial


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    lru_cache ensures .env is parsed and validated once, not on every access.
    """
    return Settings()


# Global settings instance for easy importing
# Usage: from app.config import settings
settings = get_settings()
