"""
Partner (shop) model.
"""
from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship
from datetime import datetime

from .base import Base
from ..reco import records


class Partner(Base):
    """Partner shop model"""
    __tablename__ = "partners"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    is_approved = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    garments = relationship("PartnerGarment", back_populates="owner")

    def to_record(self) -> records.Partner:
        return records.Partner(
            id=self.id,
            name=self.name,
            location=self.location,
            phone=self.phone,
            email=self.email,
            is_approved=bool(self.is_approved),
        )
