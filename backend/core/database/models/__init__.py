# ------------------------------ IMPORTS ------------------------------
from .enums import CarCategory, Transmission, FuelType, CarStatus, ReservationStatus, UserRole, Extra
from .user import User
from .car import Car
from .reservation import Reservation
from .location import Location

__all__ = [
    "User",
    "Car",
    "Reservation",
    "Location",
    "CarCategory",
    "Transmission",
    "FuelType",
    "CarStatus",
    "ReservationStatus",
    "UserRole",
    "Extra",
]
