"""
Core module for StyleMatch backend.
Contains exception handling and shared utilities.
"""
from .exceptions import (
    MatchException,
    NotFoundError,
    ValidationError,
    UpstreamError,
    ErrorResponse,
    register_exception_handlers,
    safe_execute,
)

__all__ = [
    "MatchException",
    "NotFoundError",
    "ValidationError",
    "UpstreamError",
    "ErrorResponse",
    "register_exception_handlers",
    "safe_execute",
]
