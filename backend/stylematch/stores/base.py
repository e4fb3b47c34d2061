"""
Collaborator interfaces the suggestion engine reads from.

Any object with these methods can back the engine; SQL and in-memory
implementations live next to this module.
"""
from __future__ import annotations

from typing import Any, List, Optional, Protocol

from ..reco.filters import CandidateConstraints
from ..reco.records import Garment, Occasion, Partner


class CatalogStore(Protocol):
    """Source of partner garments.

    Implementations may push the constraints down to the backing store, but
    returning an unfiltered superset is allowed.
    """

    def fetch_public_approved_garments(self, constraints: CandidateConstraints) -> List[Garment]:
        ...


class PartnerStore(Protocol):
    def get_partner(self, partner_id: Any) -> Optional[Partner]:
        ...


class OccasionStore(Protocol):
    def get_occasion(self, occasion_id: Any) -> Optional[Occasion]:
        ...


class ViewRecorder(Protocol):
    """Idempotent record of a viewer opening a garment."""

    def record_view(self, garment_id: Any, viewer_id: str) -> int:
        """Record the view and return the garment's distinct view count."""
        ...
