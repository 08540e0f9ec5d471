# ------------------------------ IMPORTS ------------------------------
from datetime import datetime
from typing import Annotated
from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from core.utils.data_helpers import to_utc

# ------------------------------ TYPES ------------------------------

def _isoformat_utc(dt: datetime) -> str:
    return to_utc(dt).isoformat()

# Stored timestamps are UTC; naive values read back from SQLite get an explicit offset
UtcDateTime = Annotated[datetime, PlainSerializer(_isoformat_utc, return_type=str)]

# Incoming timestamps; naive values are taken as UTC
UtcInputDateTime = Annotated[datetime, AfterValidator(to_utc)]

# ------------------------------ BASE MODELS ------------------------------

class CamelModel(BaseModel):
    """Request model accepting camelCase (client) or snake_case field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

class BaseOutModel(BaseModel):
    """Response model read from ORM rows, serialized with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class MessageResponse(BaseModel):
    success: bool = True
    message: str

# ------------------------------ END OF FILE ------------------------------
