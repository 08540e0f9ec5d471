# ------------------------------ IMPORTS ------------------------------
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from core.database import get_db
from core.database.operations import LocationOperations
from core.utils.api_helpers import safe_route
from .schemas import LocationCreate, LocationOut

logger = logging.getLogger(__name__)

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

# ------------------------------ LOCATION ENDPOINTS ------------------------------

@router.get("", response_model=List[LocationOut])
@safe_route
async def list_locations(db: Session = Depends(get_db)) -> List[LocationOut]:
    """List active pickup/return locations."""
    return LocationOperations(db).list_active()

@router.post("", response_model=LocationOut, status_code=201)
@safe_route
async def create_location(payload: LocationCreate, db: Session = Depends(get_db)) -> LocationOut:
    """Add a pickup/return location."""
    location = LocationOperations(db).create(payload.model_dump())
    logger.info(f"Created location {location.id} ({location.name})")
    return location

# ------------------------------ END OF FILE ------------------------------
