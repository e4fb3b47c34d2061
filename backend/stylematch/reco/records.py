"""
Read-only records the suggestion engine works on.

Stores convert their rows into these so the pipeline never touches an ORM
session or a live connection.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class Garment:
    """A partner-listed clothing item."""
    id: Any
    name: str
    category: str
    color: str
    brand: str
    price: Union[Decimal, float]
    stock: int
    visibility: str
    owner_id: Any
    created_at: Optional[datetime]
    suitable_skin_tones: Tuple[str, ...] = ()
    occasion_tags: Tuple[str, ...] = ()
    gender: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_public(self) -> bool:
        return (self.visibility or "").strip().lower() == "public"

    @property
    def in_stock(self) -> bool:
        return (self.stock or 0) > 0


@dataclass(frozen=True)
class Partner:
    """A shop that lists garments on the marketplace."""
    id: Any
    name: str
    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_approved: bool = False


@dataclass(frozen=True)
class Occasion:
    """A consumer's saved event."""
    id: Any
    title: str
    type: str
    date: Optional[Union[date, datetime]] = None
    location: Optional[str] = None
    dress_code: Optional[str] = None
    notes: Optional[str] = None
    skin_tone: Optional[str] = None
    clothes_list: Tuple[str, ...] = field(default_factory=tuple)
