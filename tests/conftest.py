"""Shared fixtures: an isolated in-memory database per test and an API client bound to it."""

import os

os.environ["DATABASE_URL"] = ""
os.environ["SQLITE_PATH"] = ":memory:"

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from core.database import get_db, init_db
from core.database.connection import create_database_engine
from core.database.operations import CarOperations
from main import app


def car_data(**overrides):
    """Column values for a car, snake_case, ready for CarOperations.create."""
    data = {
        "make": "Toyota",
        "model": "Yaris",
        "year": 2023,
        "category": "economic",
        "transmission": "automatic",
        "fuel_type": "petrol",
        "seats": 5,
        "luggage": 2,
        "has_air_conditioning": True,
        "fuel_consumption": Decimal("5.2"),
        "price_per_day": Decimal("89.00"),
        "status": "available",
        "location": "Warszawa Centrum",
        "plate_number": "WAW-001",
    }
    data.update(overrides)
    return data


def car_payload(**overrides):
    """The same car as the client sends it (camelCase JSON)."""
    payload = {
        "make": "Toyota",
        "model": "Yaris",
        "year": 2023,
        "category": "economic",
        "transmission": "automatic",
        "fuelType": "petrol",
        "seats": 5,
        "luggage": 2,
        "hasAirConditioning": True,
        "fuelConsumption": "5.2",
        "pricePerDay": "89.00",
        "status": "available",
        "location": "Warszawa Centrum",
        "plateNumber": "WAW-001",
    }
    payload.update(overrides)
    return payload


PICKUP = datetime(2025, 6, 1, 10, 0)


def reservation_payload(car_id, days=2, **overrides):
    payload = {
        "userId": 2,
        "carId": car_id,
        "pickupDate": PICKUP.isoformat(),
        "returnDate": (PICKUP + timedelta(days=days)).isoformat(),
        "pickupLocation": "Warszawa Centrum",
        "returnLocation": "Warszawa Centrum",
        "extras": [],
        "firstName": "Jan",
        "lastName": "Kowalski",
        "email": "jan.kowalski@example.com",
        "phone": "+48 123 456 789",
        "licenseNumber": "ABC123456789",
        "acceptTerms": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def engine():
    engine = create_database_engine("sqlite://")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_car(db):
    """Insert a car directly through the record store."""
    def _make_car(**overrides):
        return CarOperations(db).create(car_data(**overrides))
    return _make_car
