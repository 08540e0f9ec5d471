# ------------------------------ IMPORTS ------------------------------
from typing import Any, Dict
from sqlalchemy.orm import Session

from core.database.models import CarStatus, ReservationStatus
from core.database.operations import CarOperations, ReservationOperations, UserOperations
from core.utils.data_helpers import round_money

OPEN_STATUSES = (ReservationStatus.CONFIRMED.value, ReservationStatus.ACTIVE.value)

# ------------------------------ SERVICE ------------------------------

class StatsService:
    """Fleet and booking figures for the admin dashboard."""

    def __init__(self, db: Session):
        self.db = db

    def get_stats(self) -> Dict[str, Any]:
        cars_by_status = CarOperations(self.db).count_by_status()
        reservation_ops = ReservationOperations(self.db)
        reservations_by_status = reservation_ops.count_by_status()

        total_cars = sum(cars_by_status.values())
        active_reservations = sum(reservations_by_status.get(status, 0) for status in OPEN_STATUSES)
        utilization = round(active_reservations / total_cars * 100) if total_cars else 0

        return {
            "total_cars": total_cars,
            "cars_by_status": {status.value: cars_by_status.get(status.value, 0) for status in CarStatus},
            "active_reservations": active_reservations,
            "reservations_by_status": {status.value: reservations_by_status.get(status.value, 0) for status in ReservationStatus},
            "utilization_percent": utilization,
            "revenue": round_money(reservation_ops.sum_total_amount(exclude_status=ReservationStatus.CANCELLED.value)),
            "total_customers": UserOperations(self.db).count_customers(),
        }

# ------------------------------ END OF FILE ------------------------------
