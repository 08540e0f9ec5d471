"""Double-booking protection under concurrent requests."""

import threading
from datetime import timedelta
from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

from conftest import PICKUP, car_data, reservation_payload
from core.database import init_db
from core.database.connection import create_database_engine
from core.database.models import Car, Reservation
from core.database.operations import CarOperations, ReservationOperations
from core.utils.errors import DomainRuleViolation
from reservations.schemas import ReservationCreate
from reservations.service import ReservationService


def _booking_data(car_id):
    return {
        "user_id": 2,
        "car_id": car_id,
        "pickup_date": PICKUP,
        "return_date": PICKUP + timedelta(days=2),
        "pickup_location": "Warszawa Centrum",
        "return_location": "Warszawa Centrum",
        "status": "confirmed",
        "total_amount": Decimal("255.84"),
        "extras": [],
    }


def test_create_booking_refuses_unavailable_car(db):
    car = CarOperations(db).create(car_data(status="rented"))

    assert ReservationOperations(db).create_booking(_booking_data(car.id)) is None
    assert db.query(Reservation).count() == 0


def test_create_booking_rents_the_car(db):
    car = CarOperations(db).create(car_data())

    reservation = ReservationOperations(db).create_booking(_booking_data(car.id))

    assert reservation.id is not None
    db.refresh(car)
    assert car.status == "rented"


@pytest.fixture
def file_engine(tmp_path):
    engine = create_database_engine(f"sqlite:///{tmp_path / 'bookings.db'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


def test_concurrent_bookings_for_one_car(file_engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=file_engine)
    with Session() as setup:
        car_id = CarOperations(setup).create(car_data()).id

    attempts = 2
    barrier = threading.Barrier(attempts)
    outcomes = []
    lock = threading.Lock()

    def book(user_id):
        payload = ReservationCreate.model_validate(reservation_payload(car_id, userId=user_id))
        session = Session()
        try:
            barrier.wait()
            ReservationService(session).create_reservation(payload)
            result = "booked"
        except DomainRuleViolation:
            result = "rejected"
        finally:
            session.close()
        with lock:
            outcomes.append(result)

    threads = [threading.Thread(target=book, args=(user_id,)) for user_id in range(2, 2 + attempts)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)

    assert sorted(outcomes) == ["booked", "rejected"]
    with Session() as check:
        assert check.query(Reservation).count() == 1
        assert check.get(Car, car_id).status == "rented"
