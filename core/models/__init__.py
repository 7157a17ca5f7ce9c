# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas shared by the API and its clients:
# - config.py: AppConfig and its blocks
# - response.py: ApiResponse envelope, PaginatedResponse
# - user.py: User and request schemas
# - common.py: Status, FilterOptions, AppEvent
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Configuration Models
# -----------------------------------------------------------------------------
from .config import (
    ApiConfig,
    AppConfig,
    AuthConfig,
    CorsConfig,
    DatabaseConfig,
    Environment,
    LogLevel,
    RateLimitConfig,
)

# -----------------------------------------------------------------------------
# Response Envelope
# -----------------------------------------------------------------------------
from .response import ApiResponse, PaginatedResponse

# -----------------------------------------------------------------------------
# User Models
# -----------------------------------------------------------------------------
from .user import BaseEntity, CreateUserRequest, UpdateUserRequest, User

# -----------------------------------------------------------------------------
# Shared Types
# -----------------------------------------------------------------------------
from .common import AppEvent, EventHandler, FilterOptions, SortOrder, Status

__all__ = [
    # Config
    "ApiConfig",
    "AppConfig",
    "AuthConfig",
    "CorsConfig",
    "DatabaseConfig",
    "Environment",
    "LogLevel",
    "RateLimitConfig",
    # Response
    "ApiResponse",
    "PaginatedResponse",
    # User
    "BaseEntity",
    "CreateUserRequest",
    "UpdateUserRequest",
    "User",
    # Common
    "AppEvent",
    "EventHandler",
    "FilterOptions",
    "SortOrder",
    "Status",
]
