"""
Shapes a page of ranked garments into the suggestion response payload.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..schemas.suggestion import (
    PartnerSummary,
    Suggestion,
    SuggestionFilters,
    SuggestionMeta,
    SuggestionResponse,
)
from .paginator import Page
from .records import Partner
from .scorer import ScoredGarment


def partner_summary(partner: Optional[Partner]) -> Optional[PartnerSummary]:
    """Public contact card, or None for a missing or unapproved partner."""
    if partner is None or not partner.is_approved:
        return None
    return PartnerSummary(
        id=partner.id,
        name=partner.name,
        location=partner.location,
        phone=partner.phone,
        email=partner.email,
    )


def to_suggestion(item: ScoredGarment, partners: Mapping[Any, Partner]) -> Suggestion:
    garment = item.garment
    return Suggestion(
        id=garment.id,
        name=garment.name,
        category=garment.category,
        color=garment.color,
        image=garment.image,
        price=float(garment.price or 0),
        brand=garment.brand or "",
        gender=garment.gender,
        suitable_skin_tones=list(garment.suitable_skin_tones),
        occasion_tags=list(garment.occasion_tags),
        match_reason=item.match_reason,
        partner=partner_summary(partners.get(garment.owner_id)),
    )


def assemble(
    page: Page,
    partners: Mapping[Any, Partner],
    filters: Optional[Dict[str, Any]] = None,
) -> SuggestionResponse:
    """Build the response for one page; no filtering or scoring happens here."""
    return SuggestionResponse(
        data=[to_suggestion(item, partners) for item in page.items],
        meta=SuggestionMeta(
            total=page.total,
            page=page.page,
            limit=page.limit,
            pages=page.pages,
            filters=SuggestionFilters(**(filters or {})),
        ),
    )
