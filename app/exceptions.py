# =============================================================================
# app/exceptions.py - Exception Handlers
# =============================================================================
# Centralized exception handling for the API. Every error leaves the API in
# the response envelope: {"success": false, "error": "<message>"}.
#
# Unhandled exceptions are logged with their traceback and answered with a
# generic message; the original detail never reaches the client.
# =============================================================================

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.models.response import ApiResponse

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ApiException(Exception):
    """
    Base exception for request errors the API reports to the client.

    The message is safe to expose; status_code picks the HTTP status.
    """

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidEmailError(ApiException):
    """Raised when a submitted email address fails the shape check."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Invalid email address: {email}",
            status_code=400,
        )


def error_response(status_code: int, error: str) -> JSONResponse:
    """Build a failure envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(error).to_body(),
    )


# =============================================================================
# Exception Handlers
# =============================================================================

async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """Convert ApiException to an envelope at its status code."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Envelope for routing errors (404, 405) and explicit HTTPExceptions."""
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/query validation errors.

    Reports the first failing location, e.g. "body.email: Field required".
    """
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        summary = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        summary = "Validation error"
    return error_response(422, summary)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the failure and answer with the generic 500 envelope."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return error_response(500, GENERIC_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install all envelope handlers on the application."""
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
