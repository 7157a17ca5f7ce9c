# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides the health check endpoint for monitoring and load balancers.
# =============================================================================

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel

from core.models.response import ApiResponse

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthStatus(BaseModel):
    """Basic health check payload."""
    status: str
    uptime: float
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/health",
    response_model=ApiResponse[HealthStatus],
    response_model_exclude_none=True,
)
async def health_check(request: Request):
    """
    Health check endpoint.

    Returns status, seconds since server startup and the current time.
    """
    return ApiResponse[HealthStatus].ok(
        HealthStatus(
            status="healthy",
            uptime=time.monotonic() - request.app.state.started_at,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )
    )
