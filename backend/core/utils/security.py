# ------------------------------ IMPORTS ------------------------------
import logging
import bcrypt

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72

# ------------------------------ PASSWORD HASHING ------------------------------

def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored bcrypt hash."""
    if not plain_password or not hashed_password:
        return False

    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification error: {e}")
        return False

# ------------------------------ END OF FILE ------------------------------
