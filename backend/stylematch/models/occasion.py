"""
Saved occasion model.
"""
from sqlalchemy import Column, Date, DateTime, Integer, String, Text
from datetime import datetime

from .base import Base
from .types import TagListType
from ..reco import records


class Occasion(Base):
    """Occasion saved by a styler"""
    __tablename__ = "occasions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=True, index=True)
    title = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    date = Column(Date, nullable=True)
    location = Column(String(255), nullable=True)
    dress_code = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    skin_tone = Column(String(20), nullable=True)  # Overrides the styler's profile tone
    clothes_list = Column(TagListType, nullable=False, default=list)  # Styler wardrobe item ids picked for the occasion
    created_at = Column(DateTime, default=datetime.utcnow)

    def to_record(self) -> records.Occasion:
        return records.Occasion(
            id=self.id,
            title=self.title,
            type=self.type,
            date=self.date,
            location=self.location,
            dress_code=self.dress_code,
            notes=self.notes,
            skin_tone=self.skin_tone,
            clothes_list=tuple(str(i) for i in (self.clothes_list or ())),
        )
