# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Starter API:
# - test_config_validator.py: Startup configuration merge and validation
# - test_models.py: Pydantic model and envelope tests
# - test_utils.py: Utility function tests
# - test_api.py: Integration tests for API endpoints
# - test_settings.py: Environment settings and bootstrap
#
# Run tests with: poetry run pytest
# =============================================================================
