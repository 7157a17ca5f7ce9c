# =============================================================================
# core/exceptions.py - Core Error Types
# =============================================================================
# Errors raised by framework-agnostic code in core/.
# Each carries a machine-readable code and, where possible, a hint on how to
# fix the problem rather than only what failed.
# =============================================================================

from typing import Any


class StarterError(Exception):
    """
    Base error for the core package.

    Attributes:
        code: Machine-readable error code
        message: What went wrong
        suggestion: How to fix it, if known
        details: Structured context (e.g. the failing config locations)
    """

    def __init__(
        self,
        message: str,
        code: str = "STARTER_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result


class ConfigurationError(StarterError):
    """
    Raised when the startup configuration is unusable.

    Fatal: startup must abort, no recovery is attempted. When the merged
    config has the wrong shape, details["errors"] lists each failing
    location, e.g. {"loc": "database.port", "msg": "Field required"}.

    Example:
        try:
            config = validate_config(settings.to_partial_config())
        except ConfigurationError as e:
            for err in e.details.get("errors", []):
                print(err["loc"], err["msg"])
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code="CONFIGURATION_ERROR",
            suggestion=suggestion,
            details=details,
        )
