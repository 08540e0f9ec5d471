# ------------------------------ IMPORTS ------------------------------
from enum import Enum

# ------------------------------ ENUMS ------------------------------

class CarCategory(str, Enum):
    ECONOMIC = "economic"
    COMPACT = "compact"
    SUV = "suv"
    PREMIUM = "premium"

class Transmission(str, Enum):
    MANUAL = "manual"
    AUTOMATIC = "automatic"

class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    ELECTRIC = "electric"

class CarStatus(str, Enum):
    AVAILABLE = "available"
    RENTED = "rented"
    MAINTENANCE = "maintenance"

class ReservationStatus(str, Enum):
    CONFIRMED = "confirmed"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

class UserRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"

class Extra(str, Enum):
    GPS = "gps"
    ADDITIONAL_DRIVER = "additional_driver"
    CHILD_SEAT = "child_seat"
    INSURANCE = "insurance"

# ------------------------------ END OF FILE ------------------------------
