# ------------------------------ IMPORTS ------------------------------
from decimal import Decimal
from typing import Optional
from pydantic import Field

from core.database.models import CarCategory, CarStatus, FuelType, Transmission
from core.schemas import CamelModel, BaseOutModel, UtcDateTime, UtcInputDateTime

# ------------------------------ REQUEST MODELS ------------------------------

class CarCreate(CamelModel):
    """Car creation payload."""
    make: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2100)
    category: CarCategory
    transmission: Transmission
    fuel_type: FuelType
    seats: int = Field(..., ge=1, le=60)
    luggage: int = Field(..., ge=0)
    has_air_conditioning: bool = True
    fuel_consumption: Decimal = Field(..., ge=0, max_digits=3, decimal_places=1)
    price_per_day: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    image_url: Optional[str] = None
    status: CarStatus = CarStatus.AVAILABLE.value
    location: str = Field(..., min_length=1, max_length=255)
    plate_number: str = Field(..., min_length=1, max_length=20)
    last_service_date: Optional[UtcInputDateTime] = None

class CarUpdate(CamelModel):
    """Partial car update; only provided fields are written."""
    make: Optional[str] = Field(None, min_length=1, max_length=100)
    model: Optional[str] = Field(None, min_length=1, max_length=100)
    year: Optional[int] = Field(None, ge=1900, le=2100)
    category: Optional[CarCategory] = None
    transmission: Optional[Transmission] = None
    fuel_type: Optional[FuelType] = None
    seats: Optional[int] = Field(None, ge=1, le=60)
    luggage: Optional[int] = Field(None, ge=0)
    has_air_conditioning: Optional[bool] = None
    fuel_consumption: Optional[Decimal] = Field(None, ge=0, max_digits=3, decimal_places=1)
    price_per_day: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    image_url: Optional[str] = None
    status: Optional[CarStatus] = None
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    plate_number: Optional[str] = Field(None, min_length=1, max_length=20)
    last_service_date: Optional[UtcInputDateTime] = None

# ------------------------------ RESPONSE MODELS ------------------------------

class CarOut(BaseOutModel):
    """Car output model."""
    id: int
    make: str
    model: str
    year: int
    category: str
    transmission: str
    fuel_type: str
    seats: int
    luggage: int
    has_air_conditioning: bool
    fuel_consumption: Decimal
    price_per_day: Decimal
    image_url: Optional[str] = None
    status: str
    location: str
    plate_number: str
    last_service_date: Optional[UtcDateTime] = None
    rating: Optional[Decimal] = None
    review_count: int

# ------------------------------ END OF FILE ------------------------------
