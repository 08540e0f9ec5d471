# ------------------------------ IMPORTS ------------------------------
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

CENT = Decimal("0.01")

# ------------------------------ PARSING HELPERS ------------------------------

def parse_decimal(value: Any, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Parse a decimal-as-text value like '89.00' into a Decimal."""
    if value is None or value == "":
        return default
    if isinstance(value, Decimal):
        return value

    try:
        parsed = Decimal(str(value).replace(",", "").strip())
    except (InvalidOperation, ValueError, TypeError):
        return default
    return parsed if parsed.is_finite() else default

def round_money(amount: Decimal) -> Decimal:
    """Round a monetary amount to 2 places, halves away from zero."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)

def to_utc(dt: datetime) -> datetime:
    """Make a datetime timezone-aware in UTC; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)

# ------------------------------ END OF FILE ------------------------------
