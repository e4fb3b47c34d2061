from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from sqlalchemy.orm import Session

from stylematch.database import get_db
from stylematch.reco.engine import SuggestionEngine
from stylematch.schemas import SuggestionQuery, SuggestionResponse
from stylematch.stores import SqlCatalogStore, SqlOccasionStore, SqlPartnerStore

router = APIRouter(tags=["suggestions"])


def get_suggestion_engine(db: Session = Depends(get_db)) -> SuggestionEngine:
    """Dependency building an engine over the request's database session"""
    return SuggestionEngine(
        catalog=SqlCatalogStore(db),
        partners=SqlPartnerStore(db),
        occasions=SqlOccasionStore(db),
    )


def suggestion_query(
    page: Optional[int] = Query(None, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Items per page (capped at the configured maximum)"),
    search: Optional[str] = Query(None, description="Matches name, brand, category or color"),
    category: Optional[str] = Query(None),
    color: Optional[str] = Query(None),
    brand: Optional[str] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice"),
    max_price: Optional[float] = Query(None, alias="maxPrice"),
    skin_tone: Optional[str] = Query(None, alias="skinTone"),
    gender: Optional[str] = Query(None),
    occasion: Optional[str] = Query(None),
    occasion_id: Optional[str] = Query(None, alias="occasionId"),
    exclude_ids: Optional[List[str]] = Query(None, alias="excludeIds", description="Partner garment ids to leave out (repeatable)"),
) -> SuggestionQuery:
    """Collect the suggestion query string into a SuggestionQuery"""
    return SuggestionQuery(
        page=page,
        limit=limit,
        search=search,
        category=category,
        color=color,
        brand=brand,
        min_price=min_price,
        max_price=max_price,
        skin_tone=skin_tone,
        gender=gender,
        occasion=occasion,
        occasion_id=occasion_id or None,
        exclude_ids=exclude_ids,
    )


@router.get("/suggestions", response_model=SuggestionResponse)
def get_suggestions(
    query: SuggestionQuery = Depends(suggestion_query),
    engine: SuggestionEngine = Depends(get_suggestion_engine),
):
    """
    Ranked, paginated partner garments for the given consumer attributes.
    Every returned garment carries a matchReason.
    """
    return engine.suggest(query)


@router.get("/suggestions/skin-tone", response_model=SuggestionResponse)
def get_skin_tone_suggestions(
    skin_tone: str = Query(..., alias="skinTone", description="One of fair, light, medium, tan, deep, dark"),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    engine: SuggestionEngine = Depends(get_suggestion_engine),
):
    """Suggestions driven only by the consumer's skin tone"""
    return engine.suggest(SuggestionQuery(skin_tone=skin_tone, page=page, limit=limit))


@router.get("/suggestions/occasion", response_model=SuggestionResponse)
def get_occasion_type_suggestions(
    occasion: str = Query(..., description="Occasion label, e.g. casual, formal, wedding"),
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    engine: SuggestionEngine = Depends(get_suggestion_engine),
):
    """Suggestions driven only by an occasion label"""
    return engine.suggest(SuggestionQuery(occasion=occasion, page=page, limit=limit))


@router.get("/occasions/{saved_occasion_id}/suggestions", response_model=SuggestionResponse)
def get_saved_occasion_suggestions(
    saved_occasion_id: str,
    query: SuggestionQuery = Depends(suggestion_query),
    engine: SuggestionEngine = Depends(get_suggestion_engine),
):
    """
    Suggestions for a saved occasion. The occasion's type (or dress code) and
    skin tone drive the match; unknown ids return 404.
    """
    return engine.suggest_for_occasion(saved_occasion_id, query)
