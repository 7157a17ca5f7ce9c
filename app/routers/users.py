# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Mock user endpoints. The list is static and created users are not kept:
# every request starts from the same two records.
# =============================================================================

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter

from app.exceptions import InvalidEmailError
from core.models.response import ApiResponse
from core.models.user import CreateUserRequest, User
from lib.utils import validate_email

logger = logging.getLogger(__name__)

router = APIRouter()


def mock_users() -> list[User]:
    """The fixed user list, stamped with the current time."""
    now = datetime.now(timezone.utc)
    return [
        User(id="1", name="John Doe", email="john@example.com", created_at=now, updated_at=now),
        User(id="2", name="Jane Smith", email="jane@example.com", created_at=now, updated_at=now),
    ]


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "/users",
    response_model=ApiResponse[list[User]],
    response_model_exclude_none=True,
)
async def list_users():
    """List users."""
    return ApiResponse[list[User]].ok(mock_users())


@router.post(
    "/users",
    response_model=ApiResponse[User],
    response_model_exclude_none=True,
)
async def create_user(request: CreateUserRequest):
    """
    Create a user.

    Returns the new record with a millisecond-epoch id. The record is not
    stored, and the password (if sent) is dropped.
    """
    if not validate_email(request.email):
        raise InvalidEmailError(request.email)

    now = datetime.now(timezone.utc)
    user = User(
        id=str(int(time.time() * 1000)),
        name=request.name,
        email=request.email,
        created_at=now,
        updated_at=now,
    )
    logger.info(f"Created user {user.id}")
    return ApiResponse[User].ok(user)
