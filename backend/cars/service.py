# ------------------------------ IMPORTS ------------------------------
import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session

from core.database.models import Car
from core.database.operations import CarOperations
from core.utils.errors import DomainRuleViolation, NotFoundError
from .catalog import CarFilters, CarSort, sort_cars
from .schemas import CarCreate, CarUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"image_url", "last_service_date"}

# ------------------------------ SERVICE ------------------------------

class CarService:
    """Fleet management and catalog browsing."""

    def __init__(self, db: Session):
        self.db = db
        self.cars = CarOperations(db)

    def get_car(self, car_id: int) -> Car:
        car = self.cars.get_by_id(car_id)
        if not car:
            raise NotFoundError(f"Car {car_id} not found")
        return car

    def list_cars(self, filters: CarFilters, sort: Optional[CarSort] = None) -> List[Car]:
        """Browse the fleet with conjunctive filters and an optional ordering."""
        return sort_cars(self.cars.list_cars(filters), sort)

    def _require_unique_plate(self, plate_number: str, car_id: Optional[int] = None) -> None:
        existing = self.cars.get_by_plate_number(plate_number)
        if existing and existing.id != car_id:
            raise DomainRuleViolation(f"Plate number {plate_number} already exists")

    def create_car(self, payload: CarCreate) -> Car:
        self._require_unique_plate(payload.plate_number)
        car = self.cars.create(payload.model_dump())
        logger.info(f"Created car {car.id} ({car.make} {car.model}, {car.plate_number})")
        return car

    def update_car(self, car_id: int, payload: CarUpdate) -> Car:
        updates: Dict[str, Any] = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        if "plate_number" in updates:
            self._require_unique_plate(updates["plate_number"], car_id)

        car = self.cars.update(car_id, updates)
        if not car:
            raise NotFoundError(f"Car {car_id} not found")

        if "status" in updates:
            logger.info(f"Car {car_id} status set to {car.status}")
        return car

    def delete_car(self, car_id: int) -> None:
        if not self.cars.delete(car_id):
            raise NotFoundError(f"Car {car_id} not found")
        logger.info(f"Deleted car {car_id}")

# ------------------------------ END OF FILE ------------------------------
