# ------------------------------ IMPORTS ------------------------------
from sqlalchemy import Column, Integer, String, Numeric, DateTime, JSON, func
from core.database.connection import Base
from .enums import ReservationStatus

# ------------------------------ RESERVATION MODEL ------------------------------

class Reservation(Base):
    """Reservation model - a booking of one car by one user."""

    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, nullable=False, index=True)
    car_id = Column(Integer, nullable=False, index=True)

    pickup_date = Column(DateTime(timezone=True), nullable=False)
    return_date = Column(DateTime(timezone=True), nullable=False)
    pickup_location = Column(String(255), nullable=False)
    return_location = Column(String(255), nullable=False)

    status = Column(String(20), nullable=False, index=True, default=ReservationStatus.CONFIRMED.value, comment="confirmed, active, completed, cancelled")
    total_amount = Column(Numeric(10, 2), nullable=False)
    extras = Column(JSON, nullable=False, default=list, comment="Ordered list of extra ids")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Reservation(id={self.id}, car_id={self.car_id}, status={self.status})>"
