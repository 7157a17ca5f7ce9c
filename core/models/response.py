# =============================================================================
# core/models/response.py - API Response Envelope
# =============================================================================
# Every endpoint answers with the same envelope:
#   success: {"success": true, "data": <payload>}
#   failure: {"success": false, "error": "<message>"}
#
# The model does not reject a body carrying both data and error; that rule is
# a convention checked by is_consistent() and by the route tests.
# =============================================================================

from typing import Any, Generic, TypeVar

from pydantic import Field

from .base import CamelModel

T = TypeVar("T")


class ApiResponse(CamelModel, Generic[T]):
    """
    Uniform success/data/error wrapper.

    Example:
        ApiResponse[list[User]].ok(users)
        ApiResponse.fail("Something went wrong!")
    """

    success: bool = Field(..., description="Whether the request succeeded")
    data: T | None = Field(default=None, description="Payload, only on success")
    error: str | None = Field(default=None, description="Error message, only on failure")
    message: str | None = Field(default=None, description="Informational message")

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ApiResponse[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, message: str | None = None) -> "ApiResponse[T]":
        return cls(success=False, error=error, message=message)

    def is_consistent(self) -> bool:
        """True when data and error are not both set for this outcome."""
        if self.success:
            return self.error is None
        return self.data is None

    def to_body(self) -> dict[str, Any]:
        """JSON-ready dict with absent members omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaginatedResponse(CamelModel, Generic[T]):
    """
    One page of a larger result set.

    Declared for clients; no route paginates yet.
    """

    items: list[T] = Field(default_factory=list)
    total: int = Field(default=0, ge=0)
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    total_pages: int = Field(default=0, ge=0)
