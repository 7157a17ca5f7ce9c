# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("LOG_LEVEL", "info")

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def database_block():
    """A complete database block."""
    return {
        "host": "db.internal",
        "port": 5432,
        "database": "starter",
        "username": "starter",
        "password": "s3cret",
        "ssl": True,
    }


@pytest.fixture
def valid_partial_config(database_block):
    """Smallest partial config that passes validation."""
    return {
        "database": database_block,
        "auth": {"jwtSecret": "a-real-signing-secret"},
    }


@pytest.fixture
def client():
    """Test client for the default application (no validated config)."""
    from app.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
