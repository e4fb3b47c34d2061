"""
Pydantic schemas for StyleMatch API.

Import all schemas here for easy access.
"""
from .common import HealthResponse
from .suggestion import (
    SuggestionQuery,
    PartnerSummary,
    Suggestion,
    SuggestionFilters,
    SuggestionMeta,
    SuggestionResponse,
    ViewResponse,
)

__all__ = [
    # Common
    "HealthResponse",
    # Suggestions
    "SuggestionQuery",
    "PartnerSummary",
    "Suggestion",
    "SuggestionFilters",
    "SuggestionMeta",
    "SuggestionResponse",
    "ViewResponse",
]
