# ------------------------------ IMPORTS ------------------------------
import logging
from typing import Optional
from sqlalchemy.orm import Session

from core.database.models import User
from core.database.operations import UserOperations
from core.utils.errors import DomainRuleViolation, NotFoundError
from .schemas import UserUpdate

logger = logging.getLogger(__name__)

NULLABLE_FIELDS = {"license_number"}

# ------------------------------ SERVICE ------------------------------

class UserService:
    """Customer profile reads and updates."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserOperations(db)

    def get_user(self, user_id: int) -> User:
        user = self.users.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def require_unique(self, email: Optional[str] = None, username: Optional[str] = None, user_id: Optional[int] = None) -> None:
        """Reject an email or username already held by another user."""
        if email:
            existing = self.users.get_by_email(email)
            if existing and existing.id != user_id:
                raise DomainRuleViolation("A user with this email already exists")
        if username:
            existing = self.users.get_by_username(username)
            if existing and existing.id != user_id:
                raise DomainRuleViolation("A user with this username already exists")

    def update_user(self, user_id: int, payload: UserUpdate) -> User:
        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        self.get_user(user_id)
        self.require_unique(updates.get("email"), updates.get("username"), user_id)

        user = self.users.update(user_id, updates)
        logger.info(f"Updated profile of user {user_id}: {sorted(updates)}")
        return user

# ------------------------------ END OF FILE ------------------------------
