# ------------------------------ IMPORTS ------------------------------
from datetime import datetime
from functools import wraps
from typing import Optional
import logging

from fastapi import HTTPException

from core.utils.errors import AppError, DomainRuleViolation, UnexpectedError

logger = logging.getLogger(__name__)

# ------------------------------ API HELPER FUNCTIONS ------------------------------

def validate_credentials(email: str, password: str) -> None:
    """Validate email and password are provided."""
    if not email:
        raise DomainRuleViolation("Email is required")
    if not password:
        raise DomainRuleViolation("Password is required")

def validate_date_range(start_date: Optional[datetime], end_date: Optional[datetime]) -> None:
    """Reject filter ranges whose start lies after their end."""
    if start_date and end_date and start_date > end_date:
        raise DomainRuleViolation("startDate must be before or equal to endDate")

# ------------------------------ DECORATORS ------------------------------

def safe_route(fn):
    """Decorator to handle common error patterns."""
    @wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except (AppError, HTTPException):
            raise
        except Exception as e:
            logger.error(f"Error in {fn.__name__}: {e}")
            raise UnexpectedError()
    return wrapper

# ------------------------------ END OF FILE ------------------------------
