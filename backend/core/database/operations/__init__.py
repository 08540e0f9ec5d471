# ------------------------------ IMPORTS ------------------------------
from .user_operations import UserOperations
from .car_operations import CarOperations
from .reservation_operations import ReservationOperations
from .location_operations import LocationOperations

__all__ = [
    "UserOperations",
    "CarOperations",
    "ReservationOperations",
    "LocationOperations",
]
