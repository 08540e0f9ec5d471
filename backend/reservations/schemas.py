# ------------------------------ IMPORTS ------------------------------
from decimal import Decimal
from typing import List, Optional
from pydantic import Field, field_validator

from core.database.models import Extra, ReservationStatus
from core.schemas import CamelModel, BaseOutModel, UtcDateTime, UtcInputDateTime

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# ------------------------------ REQUEST MODELS ------------------------------

class BookingPeriod(CamelModel):
    """Car, rental window and extras shared by quotes and bookings."""
    car_id: int = Field(..., ge=1)
    pickup_date: UtcInputDateTime
    return_date: UtcInputDateTime
    extras: List[Extra] = Field(default_factory=list)

    @field_validator("extras")
    @classmethod
    def unique_extras(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("Each extra can be selected once")
        return value

class QuoteRequest(BookingPeriod):
    """Price a rental without booking it."""

class ReservationCreate(BookingPeriod):
    """Booking payload: rental window plus the driver's details."""
    user_id: int = Field(..., ge=1)
    pickup_location: str = Field(..., min_length=1, max_length=255)
    return_location: str = Field(..., min_length=1, max_length=255)
    total_amount: Optional[Decimal] = Field(None, ge=0, description="Client-side estimate; the server recomputes it")

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    license_number: str = Field(..., min_length=1, max_length=50)
    accept_terms: bool
    marketing_consent: bool = False

    @field_validator("accept_terms")
    @classmethod
    def terms_accepted(cls, value: bool) -> bool:
        if not value:
            raise ValueError("Terms and conditions must be accepted")
        return value

class ReservationUpdate(CamelModel):
    """Partial reservation update."""
    status: Optional[ReservationStatus] = None
    pickup_location: Optional[str] = Field(None, min_length=1, max_length=255)
    return_location: Optional[str] = Field(None, min_length=1, max_length=255)

# ------------------------------ RESPONSE MODELS ------------------------------

class ReservationOut(BaseOutModel):
    """Reservation output model."""
    id: int
    user_id: int
    car_id: int
    pickup_date: UtcDateTime
    return_date: UtcDateTime
    pickup_location: str
    return_location: str
    status: str
    total_amount: Decimal
    extras: List[str] = []
    created_at: Optional[UtcDateTime] = None

class QuoteOut(BaseOutModel):
    """Price breakdown of a rental."""
    car_id: int
    days: int
    daily_rate: Decimal
    car_cost: Decimal
    extras_cost: Decimal
    flat_insurance: Decimal
    subtotal: Decimal
    vat: Decimal
    total: Decimal
    extras: List[str] = []

# ------------------------------ END OF FILE ------------------------------
