# =============================================================================
# core/models/config.py - Application Configuration Schemas
# =============================================================================
# These models describe the validated application configuration:
# - DatabaseConfig: connection parameters (required at startup)
# - ApiConfig: bind address, CORS and rate limit settings
# - AuthConfig: token signing and password hashing settings
# - AppConfig: the aggregate, built once by core.config_validator
#
# All models are frozen. An AppConfig is never mutated after validation.
#
# Members of ApiConfig/AuthConfig other than the JWT secret are optional:
# the validator merges top-level blocks wholesale, so a partial "api" block
# replaces the default one and whatever it omits is simply absent.
# =============================================================================

from enum import Enum

from pydantic import Field

from .base import FrozenCamelModel


class Environment(str, Enum):
    """Deployment environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Application log level names."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class DatabaseConfig(FrozenCamelModel):
    """
    Database connection parameters.

    Example:
        {
            "host": "localhost",
            "port": 5432,
            "database": "app",
            "username": "app",
            "password": "secret",
            "ssl": false
        }
    """

    host: str = Field(..., min_length=1, description="Database server host")
    port: int = Field(..., ge=1, le=65535, description="Database server port")
    database: str = Field(..., min_length=1, description="Database name")
    username: str = Field(..., description="Database user")
    password: str = Field(..., description="Database password")
    ssl: bool | None = Field(default=None, description="Use TLS for the connection")


class CorsConfig(FrozenCamelModel):
    """Cross-origin settings."""

    origin: list[str] = Field(default_factory=list, description="Allowed origins")
    credentials: bool = Field(default=False, description="Allow credentials")


class RateLimitConfig(FrozenCamelModel):
    """Rate limit window, e.g. 100 requests per 15 minutes."""

    window_ms: int = Field(..., ge=1, description="Window length in milliseconds")
    max: int = Field(..., ge=1, description="Max requests per client per window")


class ApiConfig(FrozenCamelModel):
    """HTTP server settings."""

    port: int | None = Field(default=None, ge=1, le=65535)
    host: str | None = None
    cors: CorsConfig | None = None
    rate_limit: RateLimitConfig | None = None


class AuthConfig(FrozenCamelModel):
    """Authentication settings. Only the shape exists, nothing enforces auth."""

    jwt_secret: str = Field(..., description="Token signing secret")
    jwt_expires_in: str | None = Field(default=None, description='Token lifetime, e.g. "24h"')
    bcrypt_rounds: int | None = Field(default=None, ge=1, description="Password hashing cost factor")
    session_timeout: int | None = Field(default=None, ge=0, description="Session timeout in milliseconds")


class AppConfig(FrozenCamelModel):
    """
    Fully validated application configuration.

    Built once per process by validate_config() and passed into the
    application factory. Read-only for the process lifetime.
    """

    environment: Environment
    log_level: LogLevel
    database: DatabaseConfig
    api: ApiConfig | None = None
    auth: AuthConfig

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION
