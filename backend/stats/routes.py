# ------------------------------ IMPORTS ------------------------------
from decimal import Decimal
from typing import Dict
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.schemas import BaseOutModel
from core.utils.api_helpers import safe_route
from .service import StatsService

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

class StatsOut(BaseOutModel):
    """Admin dashboard statistics."""
    total_cars: int
    cars_by_status: Dict[str, int]
    active_reservations: int
    reservations_by_status: Dict[str, int]
    utilization_percent: int
    revenue: Decimal
    total_customers: int

# ------------------------------ STATISTICS ENDPOINTS ------------------------------

@router.get("", response_model=StatsOut)
@safe_route
async def get_stats(db: Session = Depends(get_db)) -> StatsOut:
    """Get fleet and booking statistics."""
    return StatsOut(**StatsService(db).get_stats())

# ------------------------------ END OF FILE ------------------------------
