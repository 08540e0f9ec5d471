# ------------------------------ IMPORTS ------------------------------
from typing import Optional
from pydantic import BaseModel, Field

from core.schemas import CamelModel, BaseOutModel, UtcDateTime

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# ------------------------------ REQUEST MODELS ------------------------------

class UserUpdate(CamelModel):
    """Profile update; password, role and loyalty points are not writable here."""
    username: Optional[str] = Field(None, min_length=3, max_length=100)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=50)
    license_number: Optional[str] = Field(None, max_length=50)

# ------------------------------ RESPONSE MODELS ------------------------------

class UserOut(BaseOutModel):
    """User output model; never carries the password hash."""
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    phone: str
    license_number: Optional[str] = None
    role: str
    loyalty_points: int
    created_at: Optional[UtcDateTime] = None

class UserEnvelope(BaseModel):
    user: UserOut

# ------------------------------ END OF FILE ------------------------------
