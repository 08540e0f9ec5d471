# ------------------------------ IMPORTS ------------------------------
from decimal import Decimal
from sqlalchemy import Column, Integer, String, Boolean, Numeric, DateTime
from core.database.connection import Base
from .enums import CarStatus

# ------------------------------ CAR MODEL ------------------------------

class Car(Base):
    """Car model - a vehicle of the rental fleet."""

    __tablename__ = "cars"

    id = Column(Integer, primary_key=True, index=True)

    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    category = Column(String(20), nullable=False, index=True, comment="economic, compact, suv, premium")
    transmission = Column(String(20), nullable=False, comment="manual, automatic")
    fuel_type = Column(String(20), nullable=False, comment="petrol, diesel, electric")

    seats = Column(Integer, nullable=False)
    luggage = Column(Integer, nullable=False)
    has_air_conditioning = Column(Boolean, nullable=False, default=True)
    fuel_consumption = Column(Numeric(3, 1), nullable=False, comment="Litres per 100 km")
    price_per_day = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=True)

    status = Column(String(20), nullable=False, index=True, default=CarStatus.AVAILABLE.value, comment="available, rented, maintenance")
    location = Column(String(255), nullable=False, comment="Location name snapshot")
    plate_number = Column(String(20), unique=True, nullable=False, index=True)
    last_service_date = Column(DateTime(timezone=True), nullable=True)

    rating = Column(Numeric(2, 1), nullable=True, default=Decimal("5.0"))
    review_count = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<Car(id={self.id}, plate_number={self.plate_number}, status={self.status})>"
