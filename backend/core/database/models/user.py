# ------------------------------ IMPORTS ------------------------------
from sqlalchemy import Column, Integer, String, DateTime, func
from core.database.connection import Base
from .enums import UserRole

# ------------------------------ USER MODEL ------------------------------

class User(Base):
    """User model - a customer or an administrator."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False, comment="bcrypt hash")

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(50), nullable=False)
    license_number = Column(String(50), nullable=True, comment="Driving license number")

    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value, comment="customer or admin")
    loyalty_points = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, username={self.username}, role={self.role})>"
