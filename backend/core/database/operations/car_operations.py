# ------------------------------ IMPORTS ------------------------------
from typing import Dict, List, Optional
from sqlalchemy import func

from cars.catalog import CarFilters
from core.database.models import Car
from .base_operations import BaseOperations

# ------------------------------ CAR OPERATIONS ------------------------------

class CarOperations(BaseOperations):
    """Database operations for the car fleet."""

    model = Car

    def get_by_plate_number(self, plate_number: str) -> Optional[Car]:
        return self.db.query(Car).filter(Car.plate_number == plate_number).first()

    def list_cars(self, filters: Optional[CarFilters] = None) -> List[Car]:
        """List cars matching every provided filter field, in id order; price bounds are inclusive."""
        query = self.db.query(Car)
        if filters is None:
            return query.order_by(Car.id).all()

        if filters.category is not None:
            query = query.filter(Car.category == filters.category)
        if filters.transmission is not None:
            query = query.filter(Car.transmission == filters.transmission)
        if filters.fuel_type is not None:
            query = query.filter(Car.fuel_type == filters.fuel_type)
        if filters.location is not None:
            query = query.filter(Car.location == filters.location)
        if filters.status is not None:
            query = query.filter(Car.status == filters.status)
        if filters.min_price is not None:
            query = query.filter(Car.price_per_day >= filters.min_price)
        if filters.max_price is not None:
            query = query.filter(Car.price_per_day <= filters.max_price)

        return query.order_by(Car.id).all()

    def count_by_status(self) -> Dict[str, int]:
        rows = self.db.query(Car.status, func.count(Car.id)).group_by(Car.status).all()
        return {status: count for status, count in rows}

# ------------------------------ END OF FILE ------------------------------
