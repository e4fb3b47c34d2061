"""
Error taxonomy of the suggestion service and its FastAPI handlers.

Every error leaves the API as the same envelope:

    {"success": false, "error_code": "...", "message": "...", "details": {...}}
"""
import logging
import traceback
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""
    success: bool = False
    error_code: str
    message: str
    details: Optional[Dict[str, Any]] = None


def error_response(status_code: int, error_code: str, message: str, details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error_code=error_code,
            message=message,
            details=details or None,
        ).model_dump(exclude_none=True),
    )


# =============================================================================
# Exceptions
# =============================================================================

class MatchException(Exception):
    """Base class; subclasses set the HTTP status and error code."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> JSONResponse:
        return error_response(self.status_code, self.error_code, self.message, self.details)


class NotFoundError(MatchException):
    """A referenced record (occasion, garment) does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(message, {"resource": resource, "id": resource_id})


class ValidationError(MatchException):
    """Request values the engine cannot work with (paging, price range)."""
    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, {"field": field} if field else None)


class UpstreamError(MatchException):
    """A collaborator (catalog, partner, occasion or views) failed."""
    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "UPSTREAM_ERROR"

    def __init__(self, service: str, message: str):
        self.service = service
        super().__init__(f"{service} service error: {message}", {"service": service})


# =============================================================================
# Handlers
# =============================================================================

_HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    422: "VALIDATION_ERROR",
}


async def match_exception_handler(request: Request, exc: MatchException) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path} -> {exc.error_code}: {exc.message}")
    return exc.to_response()


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the shared envelope."""
    if exc.status_code >= 500:
        error_code = "SERVER_ERROR"
    else:
        error_code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
    return error_response(exc.status_code, error_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed query/path values rejected by FastAPI before the engine runs."""
    fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
    return error_response(
        422,
        "VALIDATION_ERROR",
        "Invalid request parameters",
        {"fields": fields},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}: {exc}", exc_info=True)

    from stylematch.config import settings
    if settings.is_development:
        return error_response(500, "INTERNAL_ERROR", str(exc), {"traceback": traceback.format_exc()})
    return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MatchException, match_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, generic_exception_handler)


def safe_execute(func, *args, default=None, log_error: bool = True, **kwargs):
    """
    Run a non-critical task (e.g. startup index creation) and return
    `default` instead of raising.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        if log_error:
            logger.warning(f"{func.__name__} failed, continuing: {e}")
        return default
