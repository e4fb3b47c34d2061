"""
In-memory collaborators, used for tests and local experiments.

The catalog store returns its whole snapshot and leaves every constraint to
the engine.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from ..core.exceptions import NotFoundError
from ..reco.filters import CandidateConstraints
from ..reco.records import Garment, Occasion, Partner


class InMemoryCatalogStore:
    def __init__(self, garments: Iterable[Garment] = ()):
        self.garments: List[Garment] = list(garments)

    def fetch_public_approved_garments(self, constraints: CandidateConstraints) -> List[Garment]:
        return list(self.garments)


class InMemoryPartnerStore:
    def __init__(self, partners: Iterable[Partner] = ()):
        self.partners: Dict[Any, Partner] = {p.id: p for p in partners}

    def get_partner(self, partner_id: Any) -> Optional[Partner]:
        return self.partners.get(partner_id)


class InMemoryOccasionStore:
    def __init__(self, occasions: Iterable[Occasion] = ()):
        self.occasions: Dict[Any, Occasion] = {o.id: o for o in occasions}

    def get_occasion(self, occasion_id: Any) -> Optional[Occasion]:
        return self.occasions.get(occasion_id)


class InMemoryViewRecorder:
    def __init__(self, garment_ids: Iterable[Any] = ()):
        self.garment_ids: Set[Any] = set(garment_ids)
        self.views: Set[Tuple[Any, str]] = set()

    def record_view(self, garment_id: Any, viewer_id: str) -> int:
        if garment_id not in self.garment_ids:
            raise NotFoundError("Garment", garment_id)
        self.views.add((garment_id, viewer_id))
        return sum(1 for gid, _ in self.views if gid == garment_id)
