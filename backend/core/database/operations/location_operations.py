# ------------------------------ IMPORTS ------------------------------
from typing import List

from core.database.models import Location
from .base_operations import BaseOperations

# ------------------------------ LOCATION OPERATIONS ------------------------------

class LocationOperations(BaseOperations):
    """Database operations for pickup/return locations."""

    model = Location

    def list_active(self) -> List[Location]:
        return self.db.query(Location).filter(Location.is_active.is_(True)).order_by(Location.id).all()

# ------------------------------ END OF FILE ------------------------------
