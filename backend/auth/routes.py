# ------------------------------ IMPORTS ------------------------------
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.database import get_db
from core.utils.api_helpers import safe_route
from users.schemas import UserEnvelope, UserOut
from .schemas import LoginRequest, RegisterRequest
from .service import AuthService

# ------------------------------ ROUTER SETUP ------------------------------
router = APIRouter()

def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db)

# ------------------------------ AUTH ENDPOINTS ------------------------------

@router.post("/login", response_model=UserEnvelope)
@safe_route
async def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service)
) -> UserEnvelope:
    """Check credentials and return the user."""
    user = service.login(request.email, request.password)
    return UserEnvelope(user=UserOut.model_validate(user))

@router.post("/register", response_model=UserEnvelope, status_code=201)
@safe_route
async def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
) -> UserEnvelope:
    """Create a customer account."""
    user = service.register(request)
    return UserEnvelope(user=UserOut.model_validate(user))

# ------------------------------ END OF FILE ------------------------------
