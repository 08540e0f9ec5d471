# ------------------------------ IMPORTS ------------------------------
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
import logging

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# ------------------------------ EXCEPTIONS ------------------------------

class AppError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

class NotFoundError(AppError):
    status_code = 404
    default_message = "Resource not found"

class DomainRuleViolation(AppError):
    """A business rule rejected the request (unavailable car, bad date range, duplicate field)."""
    status_code = 400
    default_message = "Request violates a business rule"

class AuthenticationError(AppError):
    status_code = 401
    default_message = "Invalid credentials"

class UnexpectedError(AppError):
    status_code = 500
    default_message = "Server error"

# ------------------------------ RESPONSES ------------------------------

def create_error_response(message: str, errors: Optional[List[Dict[str, Any]]] = None) -> dict:
    """Create standardized error response."""
    body = {
        "success": False,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
    if errors is not None:
        body["errors"] = errors
    return body

def format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into a per-field list."""
    errors = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
        })
    return errors

# ------------------------------ HANDLERS ------------------------------

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=create_error_response(exc.message))

async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc)
    logger.info(f"{request.method} {request.url.path} rejected: {len(errors)} invalid field(s)")
    return JSONResponse(status_code=400, content=create_error_response("Invalid data", errors))

async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=create_error_response(str(exc.detail)))

async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=create_error_response(UnexpectedError.default_message))

def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error taxonomy to the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

# ------------------------------ END OF FILE ------------------------------
