"""
Test fixtures for Yatra backend tests.
"""
import os

# Settings are read once at import time, so these must be set before yatra is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["AUTH_SECRET_KEY"] = "test-secret"
os.environ["PAYMENT_SIMULATION_DELAY_SECONDS"] = "0"

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from httpx import AsyncClient, ASGITransport
from jose import jwt
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from yatra.database import Base, get_db
from yatra.main import app
from yatra.models import (
    Airline, Bus, Destination, Flight, Hotel, SeatClass, Train, User,
)


# Create test database engine (SQLite in-memory, one connection shared across threads)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign key constraints for SQLite
@event.listens_for(test_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEPARTURE = datetime(2026, 12, 15, 9, 30)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def override_get_db(db_session):
    """
    Override the get_db dependency to use the test database session.
    """
    def _override_get_db():
        try:
            yield db_session
        finally:
            pass

    return _override_get_db


@pytest.fixture(scope="function")
async def client(override_get_db):
    """
    Create an async test client with the database dependency overridden.
    """
    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def make_token(sub: str, **claims) -> str:
    return jwt.encode({"sub": sub, **claims}, "test-secret", algorithm="HS256")


@pytest.fixture
def auth_headers():
    """Bearer headers for user-1; call with another subject for a second user."""
    def _headers(sub: str = "user-1", **claims):
        claims.setdefault("email", f"{sub}@example.com")
        return {"Authorization": f"Bearer {make_token(sub, **claims)}"}

    return _headers


@pytest.fixture
def user(db_session):
    u = User(id="user-1", email="user-1@example.com", first_name="Asha", last_name="Rao")
    db_session.add(u)
    db_session.commit()
    return u


@pytest.fixture
def places(db_session):
    """Delhi and Mumbai, plus an airport row that the public listing hides."""
    delhi = Destination(name="New Delhi", city="New Delhi", state="Delhi", popularity_score=90)
    mumbai = Destination(name="Mumbai", city="Mumbai", state="Maharashtra", popularity_score=95)
    goa = Destination(name="Goa", city="Panaji", state="Goa", popularity_score=80)
    airport = Destination(name="Indira Gandhi Airport", city="New Delhi", state="Delhi", popularity_score=99)
    db_session.add_all([delhi, mumbai, goa, airport])
    db_session.commit()
    return {"delhi": delhi, "mumbai": mumbai, "goa": goa, "airport": airport}


@pytest.fixture
def airline(db_session):
    a = Airline(name="IndiGo", code="6E")
    db_session.add(a)
    db_session.commit()
    return a


@pytest.fixture
def make_flight(db_session, places, airline):
    def _make_flight(**overrides):
        values = dict(
            airline_id=airline.id,
            flight_number="201",
            from_destination_id=places["delhi"].id,
            to_destination_id=places["mumbai"].id,
            departure_time=DEPARTURE,
            arrival_time=DEPARTURE + timedelta(hours=2, minutes=15),
            duration=135,
            price=Decimal("4500.00"),
            available_seats=5,
            total_seats=180,
            seat_class=SeatClass.ECONOMY,
        )
        values.update(overrides)
        flight = Flight(**values)
        db_session.add(flight)
        db_session.commit()
        return flight

    return _make_flight


@pytest.fixture
def make_train(db_session, places):
    def _make_train(**overrides):
        values = dict(
            train_number="12952",
            train_name="Rajdhani Express",
            from_destination_id=places["delhi"].id,
            to_destination_id=places["mumbai"].id,
            departure_time=DEPARTURE,
            arrival_time=DEPARTURE + timedelta(hours=16),
            duration=960,
            price=Decimal("2100.00"),
            available_seats=40,
            seat_class=SeatClass.SLEEPER,
        )
        values.update(overrides)
        train = Train(**values)
        db_session.add(train)
        db_session.commit()
        return train

    return _make_train


@pytest.fixture
def make_bus(db_session, places):
    def _make_bus(**overrides):
        values = dict(
            operator_name="VRL Travels",
            bus_type="AC Sleeper",
            from_destination_id=places["mumbai"].id,
            to_destination_id=places["goa"].id,
            departure_time=DEPARTURE,
            arrival_time=DEPARTURE + timedelta(hours=12),
            duration=720,
            price=Decimal("1200.00"),
            available_seats=30,
            total_seats=36,
        )
        values.update(overrides)
        bus = Bus(**values)
        db_session.add(bus)
        db_session.commit()
        return bus

    return _make_bus


@pytest.fixture
def make_hotel(db_session, places):
    def _make_hotel(**overrides):
        values = dict(
            name="Sea View Residency",
            destination_id=places["goa"].id,
            address="Miramar Beach Road",
            rating=Decimal("4.2"),
            price_per_night=Decimal("3000.00"),
            amenities=["wifi", "pool"],
            available_rooms=10,
            total_rooms=40,
        )
        values.update(overrides)
        hotel = Hotel(**values)
        db_session.add(hotel)
        db_session.commit()
        return hotel

    return _make_hotel
