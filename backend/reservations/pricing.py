# ------------------------------ IMPORTS ------------------------------
"""
Reservation pricing.

A rental is charged per calendar day: the car's daily rate and every selected
extra are multiplied by the number of days, a flat insurance fee is added
once, and 23% VAT is applied on top of the subtotal.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List

from core.database.models import Extra
from core.utils.data_helpers import round_money, to_utc

# ------------------------------ CONSTANTS ------------------------------
EXTRA_PRICES: Dict[str, Decimal] = {
    Extra.GPS.value: Decimal("15"),
    Extra.ADDITIONAL_DRIVER.value: Decimal("25"),
    Extra.CHILD_SEAT.value: Decimal("20"),
    Extra.INSURANCE.value: Decimal("45"),
}

FLAT_INSURANCE = Decimal("30")
VAT_RATE = Decimal("0.23")

ZERO = Decimal("0.00")

# ------------------------------ QUOTE ------------------------------

@dataclass(frozen=True)
class PriceQuote:
    """Line items of a reservation price, rounded to 2 places."""
    days: int
    daily_rate: Decimal
    car_cost: Decimal
    extras_cost: Decimal
    flat_insurance: Decimal
    subtotal: Decimal
    vat: Decimal
    total: Decimal
    extras: List[str] = field(default_factory=list)

    @property
    def is_chargeable(self) -> bool:
        return self.days > 0

# ------------------------------ CALCULATIONS ------------------------------

def rental_days(pickup_date: datetime, return_date: datetime) -> int:
    """Calendar days from the pickup date to the return date; may be <= 0.

    Pickup and return times do not count, so 10:00 on the 1st to 18:00 on
    the 3rd is two days. Dates are taken in UTC.
    """
    return (to_utc(return_date).date() - to_utc(pickup_date).date()).days

def calculate_quote(
    daily_rate: Decimal,
    pickup_date: datetime,
    return_date: datetime,
    extras: Iterable[str] = ()
) -> PriceQuote:
    """Price a rental.

    Intermediate sums are exact; rounding happens once on the returned
    values. A non-positive duration yields an all-zero quote, which callers
    must reject before charging.
    """
    extras = list(extras)
    daily_rate = Decimal(daily_rate)
    days = rental_days(pickup_date, return_date)

    if days <= 0:
        return PriceQuote(
            days=days,
            daily_rate=round_money(daily_rate),
            car_cost=ZERO,
            extras_cost=ZERO,
            flat_insurance=ZERO,
            subtotal=ZERO,
            vat=ZERO,
            total=ZERO,
            extras=extras,
        )

    car_cost = daily_rate * days
    extras_cost = sum((EXTRA_PRICES[extra] * days for extra in extras), Decimal("0"))
    subtotal = car_cost + extras_cost + FLAT_INSURANCE
    vat = subtotal * VAT_RATE
    total = subtotal + vat

    return PriceQuote(
        days=days,
        daily_rate=round_money(daily_rate),
        car_cost=round_money(car_cost),
        extras_cost=round_money(extras_cost),
        flat_insurance=round_money(FLAT_INSURANCE),
        subtotal=round_money(subtotal),
        vat=round_money(vat),
        total=round_money(total),
        extras=extras,
    )

# ------------------------------ END OF FILE ------------------------------
