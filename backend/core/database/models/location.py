# ------------------------------ IMPORTS ------------------------------
from sqlalchemy import Column, Integer, String, Boolean
from core.database.connection import Base

# ------------------------------ LOCATION MODEL ------------------------------

class Location(Base):
    """Location model - a pickup/return branch."""

    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)

    name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    def __repr__(self):
        return f"<Location(id={self.id}, name={self.name})>"
