# =============================================================================
# tests/test_config_validator.py - Configuration Validation Tests
# =============================================================================
# This module contains tests for:
# - Rejection of configs without a database block
# - Rejection of missing, empty or placeholder JWT secrets
# - Defaults applied by the merge
# - Shallow (top-level) merge behavior
#
# Run with: poetry run pytest tests/test_config_validator.py -v
# =============================================================================

import logging

import pytest
from pydantic import ValidationError

from core.config_validator import (
    DEFAULT_CONFIG,
    DEFAULT_JWT_SECRET,
    merge_config,
    validate_config,
)
from core.exceptions import ConfigurationError
from core.models.config import (
    ApiConfig,
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    Environment,
    LogLevel,
)


# =============================================================================
# Database Block Tests
# =============================================================================

class TestDatabaseRequired:
    """A config without a database block never validates."""

    @pytest.mark.parametrize(
        "partial",
        [
            None,
            {},
            {"auth": {"jwtSecret": "a-real-signing-secret"}},
            {"environment": "production", "auth": {"jwtSecret": "x"}},
            {"database": None, "auth": {"jwtSecret": "x"}},
        ],
    )
    def test_missing_database_fails(self, partial):
        """Test that every partial lacking a database block is rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(partial)

        assert "Database configuration is required" in exc_info.value.message
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_database_checked_before_secret(self):
        """Test the database error wins when both are missing."""
        with pytest.raises(ConfigurationError, match="Database"):
            validate_config({"auth": {"jwtSecret": DEFAULT_JWT_SECRET}})

    def test_incomplete_database_block_fails(self):
        """Test that a database block missing fields is reported."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config({"database": {"host": "db"}, "auth": {"jwtSecret": "x"}})

        locations = [err["loc"] for err in exc_info.value.details["errors"]]
        assert "database.port" in locations
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_locations_logged(self, caplog):
        """Test every failing location is logged before raising."""
        with caplog.at_level(logging.ERROR, logger="core.config_validator"):
            with pytest.raises(ConfigurationError):
                validate_config({"database": {"host": "db"}, "auth": {"jwtSecret": "x"}})

        assert "database.port" in caplog.text
        assert "database.username" in caplog.text


# =============================================================================
# JWT Secret Tests
# =============================================================================

class TestJwtSecret:
    """The signing secret must be set and must not be the placeholder."""

    def test_default_secret_fails(self, database_block):
        """Test that leaving auth at its default is rejected."""
        with pytest.raises(ConfigurationError, match="JWT secret"):
            validate_config({"database": database_block})

    @pytest.mark.parametrize(
        "auth",
        [
            {"jwtSecret": DEFAULT_JWT_SECRET},
            {"jwtSecret": ""},
            {"jwt_secret": ""},
            {"jwtExpiresIn": "1h"},
            {},
            None,
        ],
    )
    def test_bad_secret_fails(self, database_block, auth):
        """Test placeholder, empty and absent secrets."""
        with pytest.raises(ConfigurationError, match="should not use default value"):
            validate_config({"database": database_block, "auth": auth})

    def test_secret_from_model(self, database_block):
        """Test that an AuthConfig instance is accepted as the auth block."""
        config = validate_config({
            "database": database_block,
            "auth": AuthConfig(jwt_secret="from-model"),
        })

        assert config.auth.jwt_secret == "from-model"

    def test_placeholder_in_model_fails(self, database_block):
        """Test the placeholder is caught when passed as a model."""
        with pytest.raises(ConfigurationError):
            validate_config({
                "database": database_block,
                "auth": AuthConfig(jwt_secret=DEFAULT_JWT_SECRET),
            })


# =============================================================================
# Successful Validation Tests
# =============================================================================

class TestValidConfig:
    """Valid partials produce a full AppConfig."""

    def test_defaults_applied(self, valid_partial_config):
        """Test environment and log level come from the defaults."""
        config = validate_config(valid_partial_config)

        assert isinstance(config, AppConfig)
        assert config.environment == Environment.DEVELOPMENT
        assert config.log_level == LogLevel.INFO
        assert config.api == DEFAULT_CONFIG["api"]
        assert config.api.port == 3000
        assert config.api.host == "0.0.0.0"
        assert config.api.cors.origin == ["http://localhost:4200", "http://localhost:3000"]
        assert config.api.cors.credentials is True
        assert config.api.rate_limit.window_ms == 15 * 60 * 1000
        assert config.api.rate_limit.max == 100

    def test_database_parsed(self, valid_partial_config):
        """Test the database block becomes a DatabaseConfig."""
        config = validate_config(valid_partial_config)

        assert isinstance(config.database, DatabaseConfig)
        assert config.database.host == "db.internal"
        assert config.database.port == 5432
        assert config.database.ssl is True

    def test_overrides_applied(self, valid_partial_config):
        """Test explicit environment and log level overrides."""
        valid_partial_config["environment"] = "production"
        valid_partial_config["logLevel"] = "debug"

        config = validate_config(valid_partial_config)

        assert config.environment == Environment.PRODUCTION
        assert config.log_level == LogLevel.DEBUG
        assert config.is_production

    def test_snake_case_keys(self, database_block):
        """Test snake_case top-level and nested keys are accepted."""
        config = validate_config({
            "database": database_block,
            "log_level": "warn",
            "auth": {"jwt_secret": "snake", "bcrypt_rounds": 12},
        })

        assert config.log_level == LogLevel.WARN
        assert config.auth.bcrypt_rounds == 12

    def test_invalid_enum_value_fails(self, valid_partial_config):
        """Test an unknown environment name is a configuration error."""
        valid_partial_config["environment"] = "qa"

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            validate_config(valid_partial_config)

    def test_result_is_frozen(self, valid_partial_config):
        """Test the validated config cannot be modified."""
        config = validate_config(valid_partial_config)

        with pytest.raises(ValidationError):
            config.environment = Environment.STAGING

    def test_serializes_with_camel_case(self, valid_partial_config):
        """Test the config dumps with the wire-format names."""
        body = validate_config(valid_partial_config).model_dump(by_alias=True, mode="json")

        assert body["logLevel"] == "info"
        assert body["auth"]["jwtSecret"] == "a-real-signing-secret"
        assert body["api"]["rateLimit"]["windowMs"] == 900000


# =============================================================================
# Shallow Merge Tests
# =============================================================================

class TestShallowMerge:
    """Top-level keys replace defaults wholesale."""

    def test_partial_api_replaces_default_block(self, valid_partial_config):
        """Test that overriding api.port drops the default cors and rateLimit."""
        valid_partial_config["api"] = {"port": 8080}

        config = validate_config(valid_partial_config)

        assert config.api == ApiConfig(port=8080)
        assert config.api.cors is None
        assert config.api.rate_limit is None
        assert config.api.host is None

    def test_partial_auth_replaces_default_block(self, valid_partial_config):
        """Test auth defaults other than the secret are not re-filled."""
        config = validate_config(valid_partial_config)

        assert config.auth.jwt_secret == "a-real-signing-secret"
        assert config.auth.jwt_expires_in is None
        assert config.auth.bcrypt_rounds is None

    def test_inputs_not_mutated(self, valid_partial_config):
        """Test the merge leaves the caller's dict and the defaults alone."""
        before = dict(valid_partial_config)
        defaults_before = dict(DEFAULT_CONFIG)

        validate_config(valid_partial_config)

        assert valid_partial_config == before
        assert dict(DEFAULT_CONFIG) == defaults_before

    def test_defaults_read_only(self):
        """Test the default mapping rejects writes."""
        with pytest.raises(TypeError):
            DEFAULT_CONFIG["environment"] = "production"  # type: ignore[index]

    def test_merge_normalizes_keys(self):
        """Test camelCase keys land on the field name."""
        merged = merge_config({"logLevel": "error"})

        assert merged["log_level"] == "error"
        assert "logLevel" not in merged

    def test_custom_defaults(self, database_block):
        """Test validation against caller-supplied defaults."""
        defaults = {
            "environment": "staging",
            "logLevel": "warn",
            "database": database_block,
            "auth": {"jwtSecret": "team-default"},
        }

        config = validate_config({}, defaults=defaults)

        assert config.environment == Environment.STAGING
        assert config.api is None
        assert config.auth.jwt_secret == "team-default"
