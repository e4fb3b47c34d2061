"""
Suggestion engine: turns a consumer request into a ranked, paginated page of
partner garments with match reasons.

The engine keeps no state between calls. Everything it learns during a
request (partner records, timings) lives in locals of that request.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from ..config import settings
from ..core.exceptions import MatchException, NotFoundError, UpstreamError, ValidationError
from ..schemas.suggestion import SuggestionQuery, SuggestionResponse
from ..utils.profiler import Profiler
from .assembler import assemble
from .filters import CandidateConstraints, filter_candidates
from .normalizer import NormalizedContext, clean, context_from_occasion, normalize, normalize_garment
from .paginator import paginate, resolve_pagination
from .records import Garment, Occasion, Partner
from .scorer import score_candidates

logger = logging.getLogger(__name__)


def build_constraints(query: SuggestionQuery, context: NormalizedContext) -> CandidateConstraints:
    """Hard constraints for a request; raises ValidationError on an inverted price range."""
    if (
        query.min_price is not None
        and query.max_price is not None
        and query.min_price > query.max_price
    ):
        raise ValidationError("minPrice must not be greater than maxPrice", field="minPrice")

    return CandidateConstraints(
        category=clean(query.category),
        color=clean(query.color),
        brand=clean(query.brand),
        search=clean(query.search),
        occasion=context.occasion_filter,
        gender=context.gender,
        min_price=query.min_price,
        max_price=query.max_price,
        exclude_ids=frozenset(str(i) for i in query.exclude_ids or ()),
    )


def echo_filters(constraints: CandidateConstraints, context: NormalizedContext) -> Dict[str, Any]:
    filters = constraints.as_filters()
    filters.update(skin_tone=context.skin_tone, occasion_id=context.occasion_id)
    return filters


class SuggestionEngine:
    """
    Ranks partner garments for one consumer request.

    Args:
        catalog: CatalogStore supplying garments
        partners: PartnerStore resolving garment owners
        occasions: OccasionStore for saved-occasion matching (optional)
        default_limit: Page size when the request names none
        max_limit: Upper bound applied to the requested page size
        fallback_reason: Match reason when no attribute fragment applies
    """

    def __init__(
        self,
        catalog,
        partners,
        occasions=None,
        default_limit: Optional[int] = None,
        max_limit: Optional[int] = None,
        fallback_reason: Optional[str] = None,
    ):
        self.catalog = catalog
        self.partners = partners
        self.occasions = occasions
        self.default_limit = default_limit or settings.DEFAULT_PAGE_LIMIT
        self.max_limit = max_limit or settings.MAX_PAGE_LIMIT
        self.fallback_reason = fallback_reason or settings.FALLBACK_MATCH_REASON

    @staticmethod
    def _upstream(service: str, func: Callable, *args):
        """Call a collaborator; any failure that is not ours becomes an UpstreamError."""
        try:
            return func(*args)
        except MatchException:
            raise
        except Exception as exc:
            logger.error(f"{service} collaborator failed: {exc}", exc_info=True)
            raise UpstreamError(service, str(exc)) from exc

    def _load_occasion(self, occasion_id: Any) -> Occasion:
        if self.occasions is None:
            raise UpstreamError("occasion", "no occasion store configured")
        occasion = self._upstream("occasion", self.occasions.get_occasion, occasion_id)
        if occasion is None:
            raise NotFoundError("Occasion", occasion_id)
        return occasion

    def _load_partners(self, catalog: Iterable[Garment]) -> Dict[Any, Partner]:
        """Owners of garments that could be shown; hidden or sold-out stock is skipped."""
        partners: Dict[Any, Partner] = {}
        owners = dict.fromkeys(g.owner_id for g in catalog if g.is_public and g.in_stock)
        for owner_id in owners:
            partner = self._upstream("partner", self.partners.get_partner, owner_id)
            if partner is not None:
                partners[owner_id] = partner
        return partners

    def suggest(self, query: Optional[SuggestionQuery] = None) -> SuggestionResponse:
        """
        Run the full pipeline for one request.

        Raises:
            ValidationError: non-positive page/limit or inverted price range
            NotFoundError: occasion_id names no saved occasion
            UpstreamError: a collaborator failed
        """
        query = query or SuggestionQuery()
        profiler = Profiler()

        page, limit = resolve_pagination(query.page, query.limit, self.default_limit, self.max_limit)

        if query.occasion_id is not None:
            with profiler.measure("occasion_lookup"):
                occasion = self._load_occasion(query.occasion_id)
            context = context_from_occasion(occasion, query.skin_tone, query.gender)
        else:
            context = normalize(query.skin_tone, query.gender, query.occasion)

        constraints = build_constraints(query, context)

        with profiler.measure("catalog_fetch"):
            fetched = self._upstream(
                "catalog", self.catalog.fetch_public_approved_garments, constraints
            )
            catalog: List[Garment] = [normalize_garment(g) for g in fetched]
        profiler.count("catalog_fetch", len(catalog))

        with profiler.measure("partner_lookup"):
            partners = self._load_partners(catalog)
        profiler.count("partner_lookup", len(partners))

        with profiler.measure("filter"):
            candidates = filter_candidates(catalog, constraints, partners)
        profiler.count("filter", len(candidates))

        with profiler.measure("score"):
            ranked = score_candidates(candidates, context, self.fallback_reason)
        profiler.count("score", len(ranked))

        with profiler.measure("paginate"):
            result_page = paginate(ranked, page, limit)
        profiler.count("paginate", len(result_page.items))

        with profiler.measure("assemble"):
            response = assemble(result_page, partners, echo_filters(constraints, context))

        logger.info(
            f"Suggestions: catalog={len(catalog)} candidates={len(candidates)} "
            f"ranked={len(ranked)} page={page}/{result_page.pages} returned={len(result_page.items)}"
        )
        profiler.log_summary("[Suggest] ")
        return response

    def suggest_for_occasion(
        self,
        occasion_id: Any,
        query: Optional[SuggestionQuery] = None,
    ) -> SuggestionResponse:
        """Suggestions for a saved occasion; other request fields still apply."""
        query = query or SuggestionQuery()
        return self.suggest(query.model_copy(update={"occasion_id": occasion_id}))
