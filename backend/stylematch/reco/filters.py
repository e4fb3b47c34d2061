"""
Hard filtering of the catalog down to suggestion candidates.

Eligibility (public, in stock, approved partner) is always enforced here even
when the catalog store already pushed it down, so a store returning an
unfiltered superset still yields a correct result.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Union

from .normalizer import clean
from .records import Garment, Partner

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class CandidateConstraints:
    """Optional hard constraints, AND-combined when present."""
    category: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    search: Optional[str] = None
    occasion: Optional[str] = None
    gender: Optional[str] = None
    min_price: Optional[Number] = None
    max_price: Optional[Number] = None
    exclude_ids: FrozenSet[str] = field(default_factory=frozenset)

    def as_filters(self) -> Dict[str, Any]:
        """Constraint values for echoing back to the caller."""
        return {
            "category": self.category,
            "color": self.color,
            "brand": self.brand,
            "search": self.search,
            "occasion": self.occasion,
            "gender": self.gender,
            "min_price": self.min_price,
            "max_price": self.max_price,
        }


def is_eligible(garment: Garment, partners: Mapping[Any, Partner]) -> bool:
    """Public, in stock and owned by an approved partner."""
    if not garment.is_public or not garment.in_stock:
        return False
    partner = partners.get(garment.owner_id)
    return partner is not None and partner.is_approved


def matches_search(garment: Garment, term: Optional[str]) -> bool:
    """Case-insensitive substring match on name, brand, category or color."""
    if not term:
        return True
    haystacks = (garment.name, garment.brand, garment.category, garment.color)
    return any(term in (value or "").lower() for value in haystacks)


def matches_occasion(garment: Garment, occasion: Optional[str]) -> bool:
    # Untagged garments fit any occasion
    if not occasion or not garment.occasion_tags:
        return True
    return occasion in garment.occasion_tags


def matches_gender(garment: Garment, gender: Optional[str]) -> bool:
    if not gender or not garment.gender:
        return True
    return garment.gender == gender


def matches_price(garment: Garment, min_price: Optional[Number], max_price: Optional[Number]) -> bool:
    price = garment.price if garment.price is not None else 0
    if min_price is not None and price < min_price:
        return False
    if max_price is not None and price > max_price:
        return False
    return True


def matches_constraints(garment: Garment, constraints: CandidateConstraints) -> bool:
    if constraints.exclude_ids and str(garment.id) in constraints.exclude_ids:
        return False
    if constraints.category and clean(garment.category) != constraints.category:
        return False
    if constraints.color and clean(garment.color) != constraints.color:
        return False
    if constraints.brand and clean(garment.brand) != constraints.brand:
        return False
    if not matches_price(garment, constraints.min_price, constraints.max_price):
        return False
    if not matches_search(garment, constraints.search):
        return False
    if not matches_occasion(garment, constraints.occasion):
        return False
    return matches_gender(garment, constraints.gender)


def filter_candidates(
    catalog: Iterable[Garment],
    constraints: CandidateConstraints,
    partners: Mapping[Any, Partner],
) -> List[Garment]:
    """
    Narrow the catalog to garments that may be suggested.

    Args:
        catalog: Normalized garments, possibly a superset of what is eligible
        constraints: Hard constraints from the request
        partners: Partner records keyed by id; missing owners are ineligible

    Returns:
        Candidates in catalog order, each garment id at most once
    """
    seen = set()
    candidates = []
    dropped = 0
    for garment in catalog:
        if garment.id in seen:
            continue
        seen.add(garment.id)
        if is_eligible(garment, partners) and matches_constraints(garment, constraints):
            candidates.append(garment)
        else:
            dropped += 1
    logger.debug(f"Candidate filter kept {len(candidates)} garments, dropped {dropped}")
    return candidates
