# ------------------------------ IMPORTS ------------------------------
from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.database.models import CarCategory, CarStatus, FuelType, Transmission
from core.schemas import MessageResponse
from core.utils.api_helpers import safe_route
from .catalog import CarFilters, CarSort
from .schemas import CarCreate, CarUpdate, CarOut
from .service import CarService

logger = logging.getLogger(__name__)

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

# ------------------------------ DEPENDENCY INJECTION ------------------------------

def get_car_service(db: Session = Depends(get_db)) -> CarService:
    """Dependency to get CarService instance."""
    return CarService(db)

def _value(member):
    return member.value if member is not None else None

# ------------------------------ CATALOG ENDPOINTS ------------------------------

@router.get("", response_model=List[CarOut])
@safe_route
async def list_cars(
    category: Optional[CarCategory] = Query(None, description="Filter by category"),
    transmission: Optional[Transmission] = Query(None, description="Filter by transmission"),
    fuel_type: Optional[FuelType] = Query(None, alias="fuelType", description="Filter by fuel type"),
    location: Optional[str] = Query(None, description="Filter by location name"),
    status: Optional[CarStatus] = Query(None, description="Filter by car status"),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0, description="Minimum daily price (inclusive)"),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0, description="Maximum daily price (inclusive)"),
    sort: Optional[CarSort] = Query(None, description="price-asc, price-desc or rating"),
    service: CarService = Depends(get_car_service)
) -> List[CarOut]:
    """Browse the fleet with filtering and sorting."""
    filters = CarFilters(
        category=_value(category),
        transmission=_value(transmission),
        fuel_type=_value(fuel_type),
        location=location or None,
        status=_value(status),
        min_price=min_price,
        max_price=max_price,
    )
    return service.list_cars(filters, sort)

@router.get("/{car_id}", response_model=CarOut)
@safe_route
async def get_car(
    car_id: int = Path(..., description="Car ID"),
    service: CarService = Depends(get_car_service)
) -> CarOut:
    """Get a single car."""
    return service.get_car(car_id)

# ------------------------------ ADMIN ENDPOINTS ------------------------------

@router.post("", response_model=CarOut, status_code=201)
@safe_route
async def create_car(
    payload: CarCreate,
    service: CarService = Depends(get_car_service)
) -> CarOut:
    """Add a car to the fleet."""
    return service.create_car(payload)

@router.put("/{car_id}", response_model=CarOut)
@safe_route
async def update_car(
    payload: CarUpdate,
    car_id: int = Path(..., description="Car ID"),
    service: CarService = Depends(get_car_service)
) -> CarOut:
    """Partially update a car, including manual status changes."""
    return service.update_car(car_id, payload)

@router.delete("/{car_id}", response_model=MessageResponse)
@safe_route
async def delete_car(
    car_id: int = Path(..., description="Car ID"),
    service: CarService = Depends(get_car_service)
) -> MessageResponse:
    """Remove a car from the fleet."""
    service.delete_car(car_id)
    return MessageResponse(message=f"Car {car_id} deleted")

# ------------------------------ END OF FILE ------------------------------
