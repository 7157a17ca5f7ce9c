# =============================================================================
# core/config_validator.py - Configuration Merge & Validation
# =============================================================================
# Builds the validated AppConfig from caller overrides and compiled-in
# defaults, or fails fast with ConfigurationError.
#
# Merge rules:
# - Shallow: each top-level key in the overrides replaces the default value
#   wholesale. {"api": {"port": 8080}} drops the default cors and rateLimit.
# - Top-level keys may be camelCase ("logLevel") or snake_case ("log_level").
#
# Usage:
#   from core.config_validator import validate_config
#   config = validate_config({"database": {...}, "auth": {"jwtSecret": "..."}})
# =============================================================================

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from core.exceptions import ConfigurationError
from core.models.config import (
    ApiConfig,
    AppConfig,
    AuthConfig,
    CorsConfig,
    Environment,
    LogLevel,
    RateLimitConfig,
)

logger = logging.getLogger(__name__)


# Published placeholder; a deployment still using it is misconfigured
DEFAULT_JWT_SECRET = "your-secret-key"

DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType({
    "environment": Environment.DEVELOPMENT,
    "log_level": LogLevel.INFO,
    "api": ApiConfig(
        port=3000,
        host="0.0.0.0",
        cors=CorsConfig(
            origin=["http://localhost:4200", "http://localhost:3000"],
            credentials=True,
        ),
        rate_limit=RateLimitConfig(
            window_ms=15 * 60 * 1000,  # 15 minutes
            max=100,
        ),
    ),
    "auth": AuthConfig(
        jwt_secret=DEFAULT_JWT_SECRET,
        jwt_expires_in="24h",
        bcrypt_rounds=10,
        session_timeout=24 * 60 * 60 * 1000,  # 24 hours
    ),
})

# camelCase alias -> field name, for the top-level keys only
_FIELD_NAMES = {
    (info.alias or name): name for name, info in AppConfig.model_fields.items()
}


def _normalize_keys(partial: Mapping[str, Any]) -> dict[str, Any]:
    return {_FIELD_NAMES.get(key, key): value for key, value in partial.items()}


def _jwt_secret(auth: Any) -> Any:
    """Read the secret from an AuthConfig or a raw mapping."""
    if auth is None:
        return None
    if isinstance(auth, AuthConfig):
        return auth.jwt_secret
    if isinstance(auth, Mapping):
        if "jwtSecret" in auth:
            return auth["jwtSecret"]
        return auth.get("jwt_secret")
    return getattr(auth, "jwt_secret", None)


def merge_config(
    partial: Mapping[str, Any] | None,
    defaults: Mapping[str, Any] = DEFAULT_CONFIG,
) -> dict[str, Any]:
    """
    Shallow-merge overrides over defaults.

    Returns a new dict keyed by field name; neither input is modified.
    """
    merged = _normalize_keys(defaults)
    merged.update(_normalize_keys(partial or {}))
    return merged


def validate_config(
    partial: Mapping[str, Any] | None = None,
    defaults: Mapping[str, Any] = DEFAULT_CONFIG,
) -> AppConfig:
    """
    Merge a partial configuration over the defaults and validate it.

    Args:
        partial: Any subset of the AppConfig fields, as a mapping. Nested
            blocks may be dicts or the config models themselves.
        defaults: Values used for keys the caller leaves out.

    Returns:
        The frozen AppConfig.

    Raises:
        ConfigurationError: database block missing, JWT secret missing/empty
            or left at the placeholder, or the merged value has the wrong shape.
    """
    merged = merge_config(partial, defaults)

    if merged.get("database") is None:
        logger.error("Configuration rejected: database block missing")
        raise ConfigurationError(
            "Database configuration is required",
            suggestion="Provide a 'database' block with host, port, database, username and password",
        )

    secret = _jwt_secret(merged.get("auth"))
    if not secret or secret == DEFAULT_JWT_SECRET:
        logger.error("Configuration rejected: JWT secret missing or left at default")
        raise ConfigurationError(
            "JWT secret must be provided and should not use default value",
            suggestion="Set auth.jwtSecret to a unique, non-empty value",
        )

    try:
        config = AppConfig.model_validate(merged)
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(part) for part in err["loc"]), "msg": err["msg"]}
            for err in e.errors()
        ]
        for err in errors:
            logger.error(f"Configuration rejected: {err['loc']}: {err['msg']}")
        raise ConfigurationError(
            f"Invalid configuration: {e.error_count()} invalid value(s)",
            suggestion="Check the field names and types in the reported locations",
            details={"errors": errors},
        ) from e

    logger.debug(
        f"Configuration validated: environment={config.environment.value} "
        f"log_level={config.log_level.value}"
    )
    return config
