# =============================================================================
# core/models/common.py - Shared Declared Types
# =============================================================================
# Types shared with clients. Filtering and events are declared here so both
# sides agree on the shape; no route acts on them yet.
# =============================================================================

from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import Field

from .base import CamelModel


class Status(str, Enum):
    """Lifecycle status for entities."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    ARCHIVED = "archived"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterOptions(CamelModel):
    """List query options."""

    search: str | None = None
    status: Status | None = None
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1, le=100)
    sort_by: str | None = None
    sort_order: SortOrder | None = None


class AppEvent(CamelModel):
    """An application event."""

    type: str
    payload: Any = None
    timestamp: datetime
    user_id: str | None = None


EventHandler = Callable[[AppEvent], None]
