# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic logic:
# - models/: Pydantic schemas (config, response envelope, users)
# - config_validator.py: Merges and validates the startup configuration
# - exceptions.py: Core error types
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
