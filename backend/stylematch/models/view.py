"""
Garment view model.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from datetime import datetime

from .base import Base


class GarmentView(Base):
    """One viewer having opened one garment; recorded at most once"""
    __tablename__ = "garment_views"
    __table_args__ = (
        UniqueConstraint("garment_id", "viewer_id", name="uq_garment_views_garment_viewer"),
    )

    id = Column(Integer, primary_key=True, index=True)
    garment_id = Column(Integer, ForeignKey("partner_garments.id"), nullable=False, index=True)
    viewer_id = Column(String(64), nullable=False)
    viewed_at = Column(DateTime, default=datetime.utcnow)
