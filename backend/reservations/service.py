# ------------------------------ IMPORTS ------------------------------
import logging
from datetime import datetime
from typing import Dict, FrozenSet, List, Optional
from sqlalchemy.orm import Session

from core.config.settings import settings
from core.database.models import Car, CarStatus, Reservation, ReservationStatus
from core.database.operations import CarOperations, ReservationOperations
from core.utils.api_helpers import validate_date_range
from core.utils.data_helpers import round_money
from core.utils.errors import DomainRuleViolation, NotFoundError
from .pricing import PriceQuote, calculate_quote
from .schemas import BookingPeriod, QuoteRequest, ReservationCreate, ReservationUpdate

logger = logging.getLogger(__name__)

# ------------------------------ STATUS TRANSITIONS ------------------------------
RESERVATION_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    ReservationStatus.CONFIRMED.value: frozenset({ReservationStatus.ACTIVE.value, ReservationStatus.CANCELLED.value}),
    ReservationStatus.ACTIVE.value: frozenset({ReservationStatus.COMPLETED.value, ReservationStatus.CANCELLED.value}),
    ReservationStatus.COMPLETED.value: frozenset(),
    ReservationStatus.CANCELLED.value: frozenset(),
}

CLOSED_STATUSES = frozenset({ReservationStatus.COMPLETED.value, ReservationStatus.CANCELLED.value})

def can_transition(current: str, new: str) -> bool:
    """Whether a reservation may move from current to new; re-setting the same status is allowed."""
    return current == new or new in RESERVATION_TRANSITIONS.get(current, frozenset())

# ------------------------------ SERVICE ------------------------------

class ReservationService:
    """Booking, pricing and reservation lifecycle."""

    def __init__(self, db: Session):
        self.db = db
        self.reservations = ReservationOperations(db)
        self.cars = CarOperations(db)

    # ------------------------------ QUERIES ------------------------------

    def get_reservation(self, reservation_id: int) -> Reservation:
        reservation = self.reservations.get_by_id(reservation_id)
        if not reservation:
            raise NotFoundError(f"Reservation {reservation_id} not found")
        return reservation

    def list_reservations(
        self,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> List[Reservation]:
        validate_date_range(start_date, end_date)
        return self.reservations.list_reservations(
            status=status,
            user_id=user_id,
            start_date=start_date,
            end_date=end_date,
        )

    def list_user_reservations(self, user_id: int) -> List[Reservation]:
        return self.reservations.list_by_user(user_id)

    # ------------------------------ PRICING ------------------------------

    @staticmethod
    def _require_valid_period(period: BookingPeriod) -> None:
        if period.return_date <= period.pickup_date:
            raise DomainRuleViolation("Return date must be after pickup date")

    def quote(self, payload: QuoteRequest) -> PriceQuote:
        """Price a rental for an existing car without booking it."""
        self._require_valid_period(payload)
        car = self.cars.get_by_id(payload.car_id)
        if not car:
            raise NotFoundError(f"Car {payload.car_id} not found")
        return calculate_quote(car.price_per_day, payload.pickup_date, payload.return_date, payload.extras)

    # ------------------------------ BOOKING ------------------------------

    def _require_available(self, car: Optional[Car], car_id: int) -> Car:
        if not car or car.status != CarStatus.AVAILABLE.value:
            logger.info(f"Booking rejected: car {car_id} is not available")
            raise DomainRuleViolation("Car is not available")
        return car

    def create_reservation(self, payload: ReservationCreate) -> Reservation:
        """Book an available car.

        The car's availability is re-checked atomically while the
        reservation is written, so of several concurrent bookings for the
        same car only one succeeds.
        """
        self._require_valid_period(payload)
        car = self._require_available(self.cars.get_by_id(payload.car_id), payload.car_id)

        quote = calculate_quote(car.price_per_day, payload.pickup_date, payload.return_date, payload.extras)
        if not quote.is_chargeable:
            raise DomainRuleViolation("Return date must be at least one day after pickup date")
        if payload.total_amount is not None and round_money(payload.total_amount) != quote.total:
            logger.warning(
                f"Client total {payload.total_amount} for car {car.id} differs from computed {quote.total}; using computed"
            )

        reservation = self.reservations.create_booking({
            "user_id": payload.user_id,
            "car_id": payload.car_id,
            "pickup_date": payload.pickup_date,
            "return_date": payload.return_date,
            "pickup_location": payload.pickup_location,
            "return_location": payload.return_location,
            "status": ReservationStatus.CONFIRMED.value,
            "total_amount": quote.total,
            "extras": list(payload.extras),
        })
        if reservation is None:
            raise DomainRuleViolation("Car is not available")

        logger.info(
            f"Reservation {reservation.id} created: car {payload.car_id}, user {payload.user_id}, "
            f"{quote.days} day(s), total {quote.total}"
        )
        return reservation

    # ------------------------------ LIFECYCLE ------------------------------

    def update_reservation(self, reservation_id: int, payload: ReservationUpdate) -> Reservation:
        """Apply a partial update, enforcing the status machine."""
        reservation = self.get_reservation(reservation_id)
        updates = {key: value for key, value in payload.model_dump(exclude_unset=True).items() if value is not None}

        new_status = updates.get("status")
        if new_status and not can_transition(reservation.status, new_status):
            raise DomainRuleViolation(f"Cannot change reservation status from {reservation.status} to {new_status}")

        closing = new_status in CLOSED_STATUSES and new_status != reservation.status
        if closing and settings.booking.release_car_on_close:
            car = self.cars.get_by_id(reservation.car_id)
            if car and car.status == CarStatus.RENTED.value:
                updated = self.reservations.update_with_car_status(
                    reservation_id, updates, car.id, CarStatus.AVAILABLE.value
                )
                logger.info(f"Reservation {reservation_id} {new_status}; car {car.id} released")
                return updated

        previous_status = reservation.status
        updated = self.reservations.update(reservation_id, updates)
        if new_status and new_status != previous_status:
            logger.info(f"Reservation {reservation_id} moved {previous_status} -> {new_status}")
        return updated

# ------------------------------ END OF FILE ------------------------------
