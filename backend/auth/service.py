# ------------------------------ IMPORTS ------------------------------
import logging
from sqlalchemy.orm import Session

from core.database.models import User
from core.database.operations import UserOperations
from core.utils.api_helpers import validate_credentials
from core.utils.errors import AuthenticationError
from core.utils.security import hash_password, verify_password
from users.service import UserService
from .schemas import RegisterRequest

logger = logging.getLogger(__name__)

# ------------------------------ SERVICE ------------------------------

class AuthService:
    """Registration and credential checks."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserOperations(db)

    def register(self, payload: RegisterRequest) -> User:
        UserService(self.db).require_unique(email=payload.email, username=payload.username)

        data = payload.model_dump(exclude={"password"})
        data["password_hash"] = hash_password(payload.password)
        data["loyalty_points"] = 0

        user = self.users.create(data)
        logger.info(f"Registered user {user.id} ({user.username}, role={user.role})")
        return user

    def login(self, email: str, password: str) -> User:
        validate_credentials(email, password)
        user = self.users.get_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            logger.info(f"Failed login for {email}")
            raise AuthenticationError("Invalid email or password")

        logger.info(f"User {user.id} logged in")
        return user

# ------------------------------ END OF FILE ------------------------------
