"""
SQLAlchemy implementations of the engine's collaborators.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import NotFoundError, UpstreamError
from ..models import GarmentView, Occasion, Partner, PartnerGarment
from ..reco import records
from ..reco.filters import CandidateConstraints
from ..reco.vocabulary import VISIBILITY_PUBLIC

logger = logging.getLogger(__name__)


def _folded(column):
    """Lower-cased, trimmed column; matches how the engine cleans request values."""
    return func.lower(func.trim(column))


def _as_int(value: Any) -> Optional[int]:
    """Integer primary key from a path/query value, None when it cannot be one."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class SqlCatalogStore:
    """Reads eligible garments, pushing the cheap constraints into SQL."""

    def __init__(self, db: Session):
        self.db = db

    def fetch_public_approved_garments(self, constraints: CandidateConstraints) -> List[records.Garment]:
        query = (
            self.db.query(PartnerGarment)
            .join(Partner, PartnerGarment.owner_id == Partner.id)
            .filter(
                _folded(PartnerGarment.visibility) == VISIBILITY_PUBLIC,
                PartnerGarment.stock > 0,
                Partner.is_approved.is_(True),
            )
        )
        if constraints.category:
            query = query.filter(_folded(PartnerGarment.category) == constraints.category)
        if constraints.color:
            query = query.filter(_folded(PartnerGarment.color) == constraints.color)
        if constraints.brand:
            query = query.filter(_folded(PartnerGarment.brand) == constraints.brand)
        if constraints.min_price is not None:
            query = query.filter(PartnerGarment.price >= constraints.min_price)
        if constraints.max_price is not None:
            query = query.filter(PartnerGarment.price <= constraints.max_price)
        if constraints.search:
            term = constraints.search
            query = query.filter(or_(
                func.lower(PartnerGarment.name).contains(term, autoescape=True),
                func.lower(PartnerGarment.brand).contains(term, autoescape=True),
                func.lower(PartnerGarment.category).contains(term, autoescape=True),
                func.lower(PartnerGarment.color).contains(term, autoescape=True),
            ))
        query = query.order_by(PartnerGarment.created_at.desc(), PartnerGarment.id)

        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            logger.error(f"Catalog query failed: {exc}", exc_info=True)
            raise UpstreamError("catalog", str(exc)) from exc
        return [row.to_record() for row in rows]


class SqlPartnerStore:
    def __init__(self, db: Session):
        self.db = db

    def get_partner(self, partner_id: Any) -> Optional[records.Partner]:
        pk = _as_int(partner_id)
        if pk is None:
            return None
        try:
            partner = self.db.get(Partner, pk)
        except SQLAlchemyError as exc:
            logger.error(f"Partner lookup failed for {partner_id}: {exc}", exc_info=True)
            raise UpstreamError("partner", str(exc)) from exc
        return partner.to_record() if partner else None


class SqlOccasionStore:
    def __init__(self, db: Session):
        self.db = db

    def get_occasion(self, occasion_id: Any) -> Optional[records.Occasion]:
        pk = _as_int(occasion_id)
        if pk is None:
            return None
        try:
            occasion = self.db.get(Occasion, pk)
        except SQLAlchemyError as exc:
            logger.error(f"Occasion lookup failed for {occasion_id}: {exc}", exc_info=True)
            raise UpstreamError("occasion", str(exc)) from exc
        return occasion.to_record() if occasion else None


class SqlViewRecorder:
    """Stores one row per (garment, viewer); repeated views are no-ops."""

    def __init__(self, db: Session):
        self.db = db

    def _count(self, garment_id: int) -> int:
        return self.db.query(GarmentView).filter(GarmentView.garment_id == garment_id).count()

    def record_view(self, garment_id: Any, viewer_id: str) -> int:
        pk = _as_int(garment_id)
        try:
            if pk is None or self.db.get(PartnerGarment, pk) is None:
                raise NotFoundError("Garment", garment_id)

            existing = (
                self.db.query(GarmentView)
                .filter(GarmentView.garment_id == pk, GarmentView.viewer_id == viewer_id)
                .first()
            )
            if existing is None:
                self.db.add(GarmentView(garment_id=pk, viewer_id=viewer_id))
                try:
                    self.db.commit()
                except IntegrityError:
                    # Same viewer recorded concurrently
                    self.db.rollback()
            return self._count(pk)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Recording view of garment {garment_id} failed: {exc}", exc_info=True)
            raise UpstreamError("views", str(exc)) from exc
