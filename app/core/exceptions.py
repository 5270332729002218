"""
Custom exceptions for the interview question generator.

Every error surfaced to the voice platform derives from AppError and carries
the HTTP status it should be reported with. The FastAPI handlers below render
errors through the response formatter configured on the application, so
callers always receive the envelope shape they expect.
"""
import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


# ============================================================================
# Custom Exception Classes
# ============================================================================

class AppError(Exception):
    """Base exception for all application errors."""
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class RequestBodyError(AppError):
    """Raised when the inbound body holds no parseable JSON object."""
    status_code = 400


class ProviderError(AppError):
    """Raised when the LLM provider answers with a non-success status or cannot be reached."""

    def __init__(self, message: str, provider_status: Optional[int] = None, body: str = ""):
        super().__init__(message, details={"provider_status": provider_status, "body": body})
        self.provider_status = provider_status
        self.body = body

    @classmethod
    def from_response(cls, provider: str, status: int, body: str) -> "ProviderError":
        return cls(f"{provider} API error: {status} - {body}", provider_status=status, body=body)


class PersistenceError(AppError):
    """Raised when the interview record cannot be written to the store."""
    pass


class ConfigurationError(AppError):
    """Exception raised when configuration is invalid or missing."""
    pass


# ============================================================================
# FastAPI Exception Handlers
# ============================================================================

def _error_payload(request: Request, message: str):
    formatter = getattr(request.app.state, "response_formatter", None)
    if formatter is None:
        return [f"Error: {message}"]
    return formatter.format([], success=False, error_message=message)


async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error(f"{type(exc).__name__}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{type(exc).__name__}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_payload(request, exc.message),
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=_error_payload(request, str(exc)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP exception: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_payload(request, str(exc.detail)),
        headers=exc.headers,
    )
