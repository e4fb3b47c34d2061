"""
Database models for StyleMatch.

Import all models here for easy access and to ensure they are registered with SQLAlchemy.
"""
from .base import Base
from .partner import Partner
from .garment import PartnerGarment
from .occasion import Occasion
from .view import GarmentView

__all__ = ["Base", "Partner", "PartnerGarment", "Occasion", "GarmentView"]
