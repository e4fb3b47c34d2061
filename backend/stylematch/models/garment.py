"""
Partner garment model.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship, validates
from datetime import datetime

from .base import Base
from .types import TagListType
from ..reco import records


class PartnerGarment(Base):
    """Garment listed by a partner shop"""
    __tablename__ = "partner_garments"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("partners.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    color = Column(String(50), nullable=False, index=True)
    brand = Column(String(100), nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    visibility = Column(String(10), nullable=False, default="private")  # public | private
    suitable_skin_tones = Column(TagListType, nullable=False, default=list)  # empty = all tones
    occasion_tags = Column(TagListType, nullable=False, default=list)  # empty = any occasion
    gender = Column(String(20), nullable=True)
    image_url = Column(Text, nullable=True)  # Hosted image URL, stored as given
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    owner = relationship("Partner", back_populates="garments")

    @validates("category", "color", "brand", "visibility")
    def _squash_whitespace(self, key, value):
        # Stored trimmed with single spaces so SQL equality filters see what the engine sees
        if isinstance(value, str):
            return " ".join(value.split())
        return value

    def to_record(self) -> records.Garment:
        return records.Garment(
            id=self.id,
            name=self.name,
            category=self.category,
            color=self.color,
            brand=self.brand or "",
            price=self.price if self.price is not None else 0,
            stock=self.stock or 0,
            visibility=self.visibility,
            owner_id=self.owner_id,
            created_at=self.created_at,
            suitable_skin_tones=tuple(self.suitable_skin_tones or ()),
            occasion_tags=tuple(self.occasion_tags or ()),
            gender=self.gender,
            image=self.image_url,
            description=self.description,
        )
