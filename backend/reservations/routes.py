# ------------------------------ IMPORTS ------------------------------
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.database.models import ReservationStatus
from core.utils.api_helpers import safe_route
from core.utils.data_helpers import to_utc
from .schemas import QuoteRequest, QuoteOut, ReservationCreate, ReservationUpdate, ReservationOut
from .service import ReservationService

logger = logging.getLogger(__name__)

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

# ------------------------------ DEPENDENCY INJECTION ------------------------------

def get_reservation_service(db: Session = Depends(get_db)) -> ReservationService:
    """Dependency to get ReservationService instance."""
    return ReservationService(db)

# ------------------------------ QUERY ENDPOINTS ------------------------------

@router.get("", response_model=List[ReservationOut])
@safe_route
async def list_reservations(
    status: Optional[ReservationStatus] = Query(None, description="Filter by reservation status"),
    user_id: Optional[int] = Query(None, alias="userId", ge=1, description="Filter by user ID"),
    start_date: Optional[datetime] = Query(None, alias="startDate", description="Pickup on or after this date (ISO format)"),
    end_date: Optional[datetime] = Query(None, alias="endDate", description="Return on or before this date (ISO format)"),
    service: ReservationService = Depends(get_reservation_service)
) -> List[ReservationOut]:
    """List reservations with filtering."""
    return service.list_reservations(
        status=status.value if status else None,
        user_id=user_id,
        start_date=to_utc(start_date) if start_date else None,
        end_date=to_utc(end_date) if end_date else None,
    )

@router.get("/user/{user_id}", response_model=List[ReservationOut])
@safe_route
async def list_user_reservations(
    user_id: int = Path(..., description="User ID"),
    service: ReservationService = Depends(get_reservation_service)
) -> List[ReservationOut]:
    """List a customer's reservations."""
    return service.list_user_reservations(user_id)

@router.get("/{reservation_id}", response_model=ReservationOut)
@safe_route
async def get_reservation(
    reservation_id: int = Path(..., description="Reservation ID"),
    service: ReservationService = Depends(get_reservation_service)
) -> ReservationOut:
    """Get a single reservation."""
    return service.get_reservation(reservation_id)

# ------------------------------ BOOKING ENDPOINTS ------------------------------

@router.post("/quote", response_model=QuoteOut)
@safe_route
async def quote_reservation(
    payload: QuoteRequest,
    service: ReservationService = Depends(get_reservation_service)
) -> QuoteOut:
    """Price a rental without booking it."""
    quote = service.quote(payload)
    return QuoteOut(
        car_id=payload.car_id,
        days=quote.days,
        daily_rate=quote.daily_rate,
        car_cost=quote.car_cost,
        extras_cost=quote.extras_cost,
        flat_insurance=quote.flat_insurance,
        subtotal=quote.subtotal,
        vat=quote.vat,
        total=quote.total,
        extras=quote.extras,
    )

@router.post("", response_model=ReservationOut, status_code=201)
@safe_route
async def create_reservation(
    payload: ReservationCreate,
    service: ReservationService = Depends(get_reservation_service)
) -> ReservationOut:
    """Book an available car."""
    return service.create_reservation(payload)

@router.put("/{reservation_id}", response_model=ReservationOut)
@safe_route
async def update_reservation(
    payload: ReservationUpdate,
    reservation_id: int = Path(..., description="Reservation ID"),
    service: ReservationService = Depends(get_reservation_service)
) -> ReservationOut:
    """Partially update a reservation (status transitions, locations)."""
    return service.update_reservation(reservation_id, payload)

# ------------------------------ END OF FILE ------------------------------
