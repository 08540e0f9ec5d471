# ------------------------------ IMPORTS ------------------------------
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from decimal import Decimal
from sqlalchemy import func, update

from core.database.models import Car, CarStatus, Reservation
from .base_operations import BaseOperations

logger = logging.getLogger(__name__)

# ------------------------------ RESERVATION OPERATIONS ------------------------------

class ReservationOperations(BaseOperations):
    """Database operations for reservations."""

    model = Reservation

    def list_reservations(
        self,
        status: Optional[str] = None,
        user_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ) -> List[Reservation]:
        """List reservations; start_date bounds pickup from below, end_date bounds return from above."""
        query = self.db.query(Reservation)

        if status:
            query = query.filter(Reservation.status == status)
        if user_id is not None:
            query = query.filter(Reservation.user_id == user_id)
        if start_date:
            query = query.filter(Reservation.pickup_date >= start_date)
        if end_date:
            query = query.filter(Reservation.return_date <= end_date)

        return query.order_by(Reservation.id).all()

    def list_by_user(self, user_id: int) -> List[Reservation]:
        return self.list_reservations(user_id=user_id)

    def _swap_car_status(self, car_id: int, expected: str, new: str) -> bool:
        """Compare-and-swap Car.status inside the current transaction."""
        result = self.db.execute(
            update(Car)
            .where(Car.id == car_id, Car.status == expected)
            .values(status=new)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def create_booking(self, data: Dict[str, Any]) -> Optional[Reservation]:
        """Flip the car to rented and insert the reservation in one transaction.

        Returns None, with nothing written, when the car was no longer
        available at commit time.
        """
        car_id = data["car_id"]
        try:
            if not self._swap_car_status(car_id, CarStatus.AVAILABLE.value, CarStatus.RENTED.value):
                self.db.rollback()
                logger.warning(f"Booking conflict: car {car_id} is not available")
                return None

            reservation = Reservation(**data)
            self.db.add(reservation)
            self.db.commit()
        except Exception as e:
            logger.error(f"Error booking car {car_id}: {e}")
            self.db.rollback()
            raise

        self.db.refresh(reservation)
        return reservation

    def update_with_car_status(
        self,
        reservation_id: int,
        updates: Dict[str, Any],
        car_id: int,
        car_status: str
    ) -> Optional[Reservation]:
        """Apply reservation updates and set its car's status in one commit."""
        reservation = self.get_by_id(reservation_id)
        if not reservation:
            return None

        for key, value in updates.items():
            setattr(reservation, key, value)
        self.db.execute(
            update(Car)
            .where(Car.id == car_id)
            .values(status=car_status)
            .execution_options(synchronize_session=False)
        )
        return self._save(reservation, f"reservation {reservation_id}")

    def count_by_status(self) -> Dict[str, int]:
        rows = self.db.query(Reservation.status, func.count(Reservation.id)).group_by(Reservation.status).all()
        return {status: count for status, count in rows}

    def sum_total_amount(self, exclude_status: str) -> Decimal:
        total = self.db.query(func.sum(Reservation.total_amount)).filter(Reservation.status != exclude_status).scalar()
        return Decimal(str(total)) if total is not None else Decimal("0")

# ------------------------------ END OF FILE ------------------------------
