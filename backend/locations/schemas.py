# ------------------------------ IMPORTS ------------------------------
from pydantic import Field

from core.schemas import CamelModel, BaseOutModel

# ------------------------------ MODELS ------------------------------

class LocationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    is_active: bool = True

class LocationOut(BaseOutModel):
    id: int
    name: str
    address: str
    city: str
    is_active: bool

# ------------------------------ END OF FILE ------------------------------
