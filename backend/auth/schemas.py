# ------------------------------ IMPORTS ------------------------------
from typing import Optional
from pydantic import Field, field_validator

from core.database.models import UserRole
from core.schemas import CamelModel
from core.utils.security import BCRYPT_MAX_BYTES
from users.schemas import EMAIL_PATTERN

# ------------------------------ REQUEST MODELS ------------------------------

class LoginRequest(CamelModel):
    email: str
    password: str

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "jan.kowalski@example.com",
                "password": "your_password"
            }
        }
    }

class RegisterRequest(CamelModel):
    """Account registration payload."""
    username: str = Field(..., min_length=3, max_length=100)
    email: str = Field(..., pattern=EMAIL_PATTERN, max_length=255)
    password: str = Field(..., min_length=6)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=50)
    license_number: Optional[str] = Field(None, max_length=50)
    role: UserRole = UserRole.CUSTOMER.value

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value

# ------------------------------ END OF FILE ------------------------------
