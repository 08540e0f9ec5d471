# ------------------------------ IMPORTS ------------------------------
from typing import Optional
from sqlalchemy import func

from core.database.models import User, UserRole
from .base_operations import BaseOperations

# ------------------------------ USER OPERATIONS ------------------------------

class UserOperations(BaseOperations):
    """Database operations for users."""

    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def count_customers(self) -> int:
        return self.db.query(func.count(User.id)).filter(User.role == UserRole.CUSTOMER.value).scalar() or 0

# ------------------------------ END OF FILE ------------------------------
