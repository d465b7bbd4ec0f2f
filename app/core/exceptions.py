"""Exception Handling - Custom exceptions and global handlers.

Provides:
- Exception hierarchy for request-level errors
- error_response(), shared by the handlers and by middleware
- Global exception handlers that return consistent JSON bodies

Exceptions raised inside BaseHTTPMiddleware.dispatch never reach the
handlers registered on the app, so middleware builds its own response
through error_response().
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.logging import get_logger
from app.models import ErrorResponse

logger = get_logger("app.exceptions")


# =============================================================================
# Custom Exception Hierarchy
# =============================================================================


class AppException(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "APP_ERROR",
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class MalformedJSONError(AppException):
    """Request body is not acceptable JSON (400)."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__(
            message="Malformed JSON in request body",
            error_code="MALFORMED_JSON",
            status_code=400,
            detail=detail,
        )


class PayloadTooLargeError(AppException):
    """Request body exceeds the configured limit (413)."""

    def __init__(self, limit: int):
        super().__init__(
            message="Request entity too large",
            error_code="PAYLOAD_TOO_LARGE",
            status_code=413,
            detail=f"Maximum body size: {limit} bytes",
        )


class UnsupportedCharsetError(AppException):
    """JSON body declared in a charset other than UTF-8 (415)."""

    def __init__(self, charset: str):
        super().__init__(
            message=f"Unsupported charset \"{charset.upper()}\"",
            error_code="UNSUPPORTED_CHARSET",
            status_code=415,
        )


def error_response(exc: AppException) -> JSONResponse:
    """Render an AppException as the standard JSON error body."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.error_code,
            message=exc.message,
            detail=exc.detail,
        ).model_dump(),
    )


# =============================================================================
# Global Exception Handlers
# =============================================================================


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        logger.warning(
            f"{request.method} {request.url.path} {exc.error_code}: {exc.message}"
            + (f" | {exc.detail}" if exc.detail else "")
        )
        return error_response(exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all handler for unexpected exceptions.

        Never expose internal error details to clients.
        """
        logger.exception(
            f"{request.method} {request.url.path} Unhandled exception: "
            f"{type(exc).__name__}"
        )
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="INTERNAL_ERROR",
                message="An unexpected error occurred",
            ).model_dump(),
        )
