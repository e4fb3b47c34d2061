"""
Collaborators the suggestion engine reads from.
"""
from .base import CatalogStore, OccasionStore, PartnerStore, ViewRecorder
from .memory import (
    InMemoryCatalogStore,
    InMemoryOccasionStore,
    InMemoryPartnerStore,
    InMemoryViewRecorder,
)
from .sql import SqlCatalogStore, SqlOccasionStore, SqlPartnerStore, SqlViewRecorder

__all__ = [
    "CatalogStore",
    "OccasionStore",
    "PartnerStore",
    "ViewRecorder",
    "InMemoryCatalogStore",
    "InMemoryOccasionStore",
    "InMemoryPartnerStore",
    "InMemoryViewRecorder",
    "SqlCatalogStore",
    "SqlOccasionStore",
    "SqlPartnerStore",
    "SqlViewRecorder",
]
