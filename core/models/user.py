# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: a user record returned to clients
# - CreateUserRequest: input for POST /api/users
# - UpdateUserRequest: fields a client may change
#
# Users are mock data. Nothing is stored between requests.
# =============================================================================

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class BaseEntity(CamelModel):
    """Fields every stored entity carries."""

    id: str = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class User(BaseEntity):
    """
    A user record.

    Example:
        {
            "id": "1",
            "email": "john@example.com",
            "name": "John Doe",
            "createdAt": "2024-01-15T10:30:00Z",
            "updatedAt": "2024-01-15T10:30:00Z"
        }
    """

    email: str = Field(..., description="Email address")
    name: str = Field(..., description="Display name")
    avatar: str | None = Field(default=None, description="Avatar image URL")


class CreateUserRequest(CamelModel):
    """Body of POST /api/users."""

    email: str = Field(..., examples=["jane@example.com"])
    name: str = Field(..., examples=["Jane Smith"])
    # Accepted for contract compatibility, never stored or echoed
    password: str | None = Field(default=None, exclude=True)


class UpdateUserRequest(CamelModel):
    """Fields a client may change on a user."""

    name: str | None = None
    avatar: str | None = None
