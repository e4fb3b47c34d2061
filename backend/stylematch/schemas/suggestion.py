"""
Suggestion request and response schemas.
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Union

Identifier = Union[int, str]


class SuggestionQuery(BaseModel):
    """Input for a suggestion request; paging is validated by the engine"""
    page: Optional[int] = Field(None, description="Page number (1-based)")
    limit: Optional[int] = Field(None, description="Items per page (capped at the configured maximum)")
    search: Optional[str] = Field(None, description="Substring matched against name, brand, category or color")
    category: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    skin_tone: Optional[str] = Field(None, alias="skinTone")
    gender: Optional[str] = None
    occasion: Optional[str] = Field(None, description="Occasion label used as an explicit filter and for scoring")
    occasion_id: Optional[Identifier] = Field(None, alias="occasionId", description="Saved occasion to match against")
    exclude_ids: Optional[List[Identifier]] = Field(None, alias="excludeIds", description="Partner garment ids to leave out")

    class Config:
        populate_by_name = True


class PartnerSummary(BaseModel):
    """Public contact details of the shop that owns a garment"""
    id: Identifier
    name: str
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class Suggestion(BaseModel):
    """A garment suggested to the consumer, with the reason it was picked"""
    id: Identifier
    name: str
    category: str
    color: str
    image: Optional[str] = None
    price: float
    brand: str
    gender: Optional[str] = None
    suitable_skin_tones: List[str] = Field(default_factory=list, alias="suitableSkinTones")
    occasion_tags: List[str] = Field(default_factory=list, alias="occasionTags")
    match_reason: str = Field(..., min_length=1, alias="matchReason")
    partner: Optional[PartnerSummary] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "id": 7,
                "name": "Linen Wrap Dress",
                "category": "dress",
                "color": "coral",
                "image": "https://res.cloudinary.com/demo/image/upload/dress.jpg",
                "price": 59.0,
                "brand": "Sunday Studio",
                "gender": "female",
                "suitableSkinTones": ["tan", "deep"],
                "occasionTags": ["beach", "party"],
                "matchReason": "Suits your tan skin tone • Great for beach occasions",
                "partner": {
                    "id": 3,
                    "name": "Sunday Studio",
                    "location": "Colombo",
                    "phone": "+94 77 000 0000",
                    "email": "shop@sundaystudio.example",
                },
            }
        }


class SuggestionFilters(BaseModel):
    """Normalized constraints echoed back to the caller"""
    search: Optional[str] = None
    category: Optional[str] = None
    color: Optional[str] = None
    brand: Optional[str] = None
    min_price: Optional[float] = Field(None, alias="minPrice")
    max_price: Optional[float] = Field(None, alias="maxPrice")
    skin_tone: Optional[str] = Field(None, alias="skinTone")
    gender: Optional[str] = None
    occasion: Optional[str] = None
    occasion_id: Optional[Identifier] = Field(None, alias="occasionId")

    class Config:
        populate_by_name = True


class SuggestionMeta(BaseModel):
    total: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    pages: int = Field(..., ge=1)
    filters: SuggestionFilters = Field(default_factory=SuggestionFilters)


class SuggestionResponse(BaseModel):
    """Suggestion page response"""
    data: List[Suggestion] = []
    meta: SuggestionMeta


class ViewResponse(BaseModel):
    """Result of recording a garment view"""
    message: str
    view_count: int = Field(..., alias="viewCount")

    class Config:
        populate_by_name = True
