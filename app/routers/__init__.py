# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - users.py: Mock user endpoints
#
# Each router is mounted in main.py under the /api prefix.
# =============================================================================

from . import health
from . import users

__all__ = [
    "health",
    "users",
]
