"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Point the application engine at SQLite before any app module is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import itertools
from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from admin_api.main import app
from admin_api.models import (
    Aircraft,
    Airline,
    Airport,
    AncillaryProduct,
    AppUser,
    Base,
    ContextualPricingAttributes,
    Country,
    EmployeeProfile,
    FareBasisCode,
    PriceOfferLog,
)
from shared.config.constants import EMPLOYEE_USER_TYPES, UserType
from shared.infrastructure.db import get_db


_id_counter = itertools.count(1000)


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def next_id() -> int:
    """Unique integer for test keys and names."""
    return next(_id_counter)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Seed fixtures
# =============================================================================


@pytest.fixture
def seed_country(db_session):
    country = Country(iso_code="FRA", name="France", continent="Europe")
    db_session.add(country)
    db_session.commit()
    db_session.refresh(country)
    return country


@pytest.fixture
def seed_airport(db_session, seed_country):
    airport = Airport(
        iata_code="CDG",
        name="Charles de Gaulle",
        city="Paris",
        country_id=seed_country.iso_code,
    )
    db_session.add(airport)
    db_session.commit()
    db_session.refresh(airport)
    return airport


@pytest.fixture
def seed_second_airport(db_session, seed_country):
    airport = Airport(
        iata_code="ORY",
        name="Orly",
        city="Paris",
        country_id=seed_country.iso_code,
    )
    db_session.add(airport)
    db_session.commit()
    db_session.refresh(airport)
    return airport


@pytest.fixture
def seed_airline(db_session, seed_airport):
    airline = Airline(
        iata_code="AF",
        name="Air France",
        callsign="AIRFRANS",
        operating_region="Europe",
        base_airport_id=seed_airport.iata_code,
    )
    db_session.add(airline)
    db_session.commit()
    db_session.refresh(airline)
    return airline


@pytest.fixture
def seed_aircraft(db_session, seed_airline):
    aircraft = Aircraft(tail_number="F-GSQA", model="B777-300ER", airline_id=seed_airline.iata_code)
    db_session.add(aircraft)
    db_session.commit()
    db_session.refresh(aircraft)
    return aircraft


@pytest.fixture
def seed_fare(db_session):
    fare = FareBasisCode(code="YOW", description="Economy one way", rules="Refundable")
    db_session.add(fare)
    db_session.commit()
    db_session.refresh(fare)
    return fare


@pytest.fixture
def seed_ancillary(db_session):
    product = AncillaryProduct(name="Extra bag 23kg", category="Baggage", base_cost_cents=4500)
    db_session.add(product)
    db_session.commit()
    db_session.refresh(product)
    return product


@pytest.fixture
def seed_context(db_session):
    context = ContextualPricingAttributes(
        time_until_departure=30,
        length_of_stay=7,
        competitor_fares="[]",
        willingness_to_pay=3,
    )
    db_session.add(context)
    db_session.commit()
    db_session.refresh(context)
    return context


@pytest.fixture
def make_price_log(db_session, seed_context):
    """Factory inserting a price offer log row directly."""

    def _make(
        cents: int,
        *,
        fare_id: str | None = None,
        ancillary_id: int | None = None,
        when: datetime | None = None,
        is_deleted: bool = False,
    ) -> PriceOfferLog:
        log = PriceOfferLog(
            offer_price_cents=cents,
            timestamp=when or datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc),
            context_attributes_id=seed_context.attribute_id,
            fare_id=fare_id,
            ancillary_id=ancillary_id,
            is_deleted=is_deleted,
        )
        db_session.add(log)
        db_session.commit()
        db_session.refresh(log)
        return log

    return _make


@pytest.fixture
def make_user(db_session):
    """Factory inserting an AppUser (with an employee row for staff types)."""

    def _make(
        user_type: UserType,
        *,
        first_name: str = "Test",
        last_name: str = "User",
        email: str | None = None,
    ) -> AppUser:
        uid = next_id()
        user = AppUser(
            user_id=f"user-{uid}",
            email=email or f"user{uid}@example.com",
            first_name=first_name,
            last_name=last_name,
            user_type=user_type,
        )
        db_session.add(user)
        if user_type in EMPLOYEE_USER_TYPES:
            db_session.add(
                EmployeeProfile(
                    app_user_id=user.user_id,
                    employee_number=f"E{uid}",
                    hire_date=date(2020, 1, 15),
                )
            )
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make
