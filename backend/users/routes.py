# ------------------------------ IMPORTS ------------------------------
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from core.database import get_db
from core.utils.api_helpers import safe_route
from .schemas import UserUpdate, UserOut
from .service import UserService

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db)

# ------------------------------ PROFILE ENDPOINTS ------------------------------

@router.get("/{user_id}", response_model=UserOut)
@safe_route
async def get_user(
    user_id: int = Path(..., description="User ID"),
    service: UserService = Depends(get_user_service)
) -> UserOut:
    """Get a user profile."""
    return service.get_user(user_id)

@router.put("/{user_id}", response_model=UserOut)
@safe_route
async def update_user(
    payload: UserUpdate,
    user_id: int = Path(..., description="User ID"),
    service: UserService = Depends(get_user_service)
) -> UserOut:
    """Update a user profile. Password fields in the body are ignored."""
    return service.update_user(user_id, payload)

# ------------------------------ END OF FILE ------------------------------
