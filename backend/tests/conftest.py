"""
Pytest configuration and shared fixtures for the suggestion engine tests.
"""
import os
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable, Iterable, Optional

# Keep tests off any configured database; must happen before stylematch imports
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENSURE_INDEXES_ON_STARTUP"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stylematch.models import Base, Partner as PartnerRow, PartnerGarment
from stylematch.reco.engine import SuggestionEngine
from stylematch.reco.records import Garment, Occasion, Partner
from stylematch.stores import InMemoryCatalogStore, InMemoryOccasionStore, InMemoryPartnerStore

BASE_TIME = datetime(2026, 3, 1, 9, 0, 0)


# ============================================================================
# Fixtures: Test Data Factories
# ============================================================================

@pytest.fixture
def approved_partner() -> Partner:
    return Partner(
        id=1,
        name="Sunday Studio",
        location="Colombo",
        phone="+94 77 000 0000",
        email="shop@sundaystudio.example",
        is_approved=True,
    )


@pytest.fixture
def pending_partner() -> Partner:
    return Partner(id=2, name="Pending Threads", location="Kandy", is_approved=False)


@pytest.fixture
def make_garment() -> Callable[..., Garment]:
    """Factory for public, in-stock garments owned by partner 1.

    created_at grows with id so newer ids sort first unless overridden.
    """
    def _make(garment_id, **overrides) -> Garment:
        offset = garment_id if isinstance(garment_id, int) else 0
        values = dict(
            id=garment_id,
            name=f"Garment {garment_id}",
            category="dress",
            color="red",
            brand="Sunday Studio",
            price=Decimal("49.99"),
            stock=5,
            visibility="public",
            owner_id=1,
            created_at=BASE_TIME + timedelta(hours=offset),
            suitable_skin_tones=(),
            occasion_tags=(),
            gender=None,
            image=f"https://cdn.example/{garment_id}.jpg",
        )
        values.update(overrides)
        return Garment(**values)
    return _make


@pytest.fixture
def make_occasion() -> Callable[..., Occasion]:
    def _make(occasion_id=10, **overrides) -> Occasion:
        values = dict(
            id=occasion_id,
            title="Cousin's wedding",
            type="wedding",
            location="Galle",
            dress_code=None,
            notes=None,
            skin_tone=None,
            clothes_list=(),
        )
        values.update(overrides)
        return Occasion(**values)
    return _make


@pytest.fixture
def make_engine(approved_partner) -> Callable[..., SuggestionEngine]:
    """Engine over in-memory stores; partner 1 (approved) exists by default."""
    def _make(
        garments: Iterable[Garment] = (),
        partners: Optional[Iterable[Partner]] = None,
        occasions: Iterable[Occasion] = (),
        **kwargs,
    ) -> SuggestionEngine:
        return SuggestionEngine(
            catalog=InMemoryCatalogStore(garments),
            partners=InMemoryPartnerStore(partners if partners is not None else [approved_partner]),
            occasions=InMemoryOccasionStore(occasions),
            **kwargs,
        )
    return _make


# ============================================================================
# Fixtures: Database
# ============================================================================

@pytest.fixture
def db_engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_catalog(db_session):
    """Insert partners and garments; returns the garment rows by name."""
    def _seed():
        studio = PartnerRow(
            id=1, name="Sunday Studio", location="Colombo",
            phone="+94 77 000 0000", email="shop@sundaystudio.example", is_approved=True,
        )
        pending = PartnerRow(id=2, name="Pending Threads", location="Kandy", is_approved=False)
        db_session.add_all([studio, pending])

        rows = {
            "dark_dress": PartnerGarment(
                owner_id=1, name="Emerald Maxi Dress", category="dress", color="green",
                brand="Sunday Studio", price=Decimal("89.00"), stock=3, visibility="public",
                suitable_skin_tones=["dark", "deep"], occasion_tags=["wedding", "party"],
                gender="female", created_at=BASE_TIME,
            ),
            "universal_shirt": PartnerGarment(
                owner_id=1, name="Oxford Shirt", category="shirt", color="white",
                brand="Loom & Co", price=Decimal("35.50"), stock=10, visibility="public",
                suitable_skin_tones=[], occasion_tags=[], gender=None,
                created_at=BASE_TIME + timedelta(days=1),
            ),
            "fair_blazer": PartnerGarment(
                owner_id=1, name="Linen Blazer", category="blazer", color="beige",
                brand="Loom & Co", price=Decimal("120.00"), stock=2, visibility="public",
                suitable_skin_tones=["fair"], occasion_tags=["business"], gender="male",
                created_at=BASE_TIME + timedelta(days=2),
            ),
            "private_skirt": PartnerGarment(
                owner_id=1, name="Hidden Skirt", category="skirt", color="black",
                brand="Sunday Studio", price=Decimal("20.00"), stock=4, visibility="private",
                created_at=BASE_TIME + timedelta(days=3),
            ),
            "sold_out_coat": PartnerGarment(
                owner_id=1, name="Wool Coat", category="coat", color="navy",
                brand="Sunday Studio", price=Decimal("150.00"), stock=0, visibility="public",
                created_at=BASE_TIME + timedelta(days=4),
            ),
            "pending_top": PartnerGarment(
                owner_id=2, name="Silk Top", category="top", color="pink",
                brand="Pending Threads", price=Decimal("40.00"), stock=6, visibility="public",
                created_at=BASE_TIME + timedelta(days=5),
            ),
        }
        db_session.add_all(rows.values())
        db_session.commit()
        return rows
    return _seed


@pytest.fixture
def client(db_session):
    """FastAPI test client bound to the test database."""
    from fastapi.testclient import TestClient
    from stylematch.database import get_db
    from stylematch.main import app

    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
