# ------------------------------ IMPORTS ------------------------------
from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, List, Optional

from core.utils.data_helpers import parse_decimal

# ------------------------------ SORT KEYS ------------------------------

class CarSort(str, Enum):
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING = "rating"

# ------------------------------ FILTERS ------------------------------

@dataclass
class CarFilters:
    """Optional catalog constraints; None means the field is not constrained."""
    category: Optional[str] = None
    transmission: Optional[str] = None
    fuel_type: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None

    def price_in_band(self, price: Optional[Decimal]) -> bool:
        if price is None:
            return self.min_price is None and self.max_price is None
        if self.min_price is not None and price < self.min_price:
            return False
        if self.max_price is not None and price > self.max_price:
            return False
        return True

    def matches(self, car: Any) -> bool:
        """In-memory form of the predicates CarOperations.list_cars applies in SQL."""
        return (
            (self.category is None or car.category == self.category)
            and (self.transmission is None or car.transmission == self.transmission)
            and (self.fuel_type is None or car.fuel_type == self.fuel_type)
            and (self.location is None or car.location == self.location)
            and (self.status is None or car.status == self.status)
            and self.price_in_band(parse_decimal(car.price_per_day))
        )

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

# ------------------------------ CATALOG FUNCTIONS ------------------------------

def filter_cars(cars: Iterable[Any], filters: CarFilters) -> List[Any]:
    """Keep the cars matching every provided filter, preserving order."""
    if filters.is_empty():
        return list(cars)
    return [car for car in cars if filters.matches(car)]

def _price(car: Any) -> Decimal:
    return parse_decimal(car.price_per_day, Decimal("0"))

def _rating(car: Any) -> Decimal:
    return parse_decimal(car.rating, Decimal("0"))

def sort_cars(cars: Iterable[Any], sort: Optional[CarSort] = None) -> List[Any]:
    """Order cars by price or rating; ties keep their incoming order."""
    cars = list(cars)
    if sort is None:
        return cars

    sort = CarSort(sort)
    if sort == CarSort.PRICE_ASC:
        return sorted(cars, key=_price)
    if sort == CarSort.PRICE_DESC:
        return sorted(cars, key=_price, reverse=True)
    return sorted(cars, key=_rating, reverse=True)

# ------------------------------ END OF FILE ------------------------------
