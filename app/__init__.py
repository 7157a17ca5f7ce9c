# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, startup bootstrap
# - config.py: Environment variable loading and settings
# - exceptions.py: Error envelope handlers
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# configuration and validation logic to the core/ and lib/ packages.
# =============================================================================
