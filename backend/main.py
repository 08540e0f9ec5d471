# ------------------------------ IMPORTS ------------------------------
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
import logging

from core.config.settings import settings
from core.database import init_db, get_db, get_db_session
from core.database.seed import seed_database
from core.utils.errors import register_exception_handlers
from auth.routes import router as auth_router
from cars.routes import router as cars_router
from reservations.routes import router as reservations_router
from locations.routes import router as locations_router
from users.routes import router as users_router
from stats.routes import router as stats_router

# ------------------------------ SETUP ------------------------------
logger = logging.getLogger("autowinajem")

# ------------------------------ LIFESPAN ------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    try:
        logger.info("Initializing database...")
        init_db()
        if settings.booking.seed_on_startup:
            with get_db_session() as db:
                seed_database(db)
        logger.info("Database initialized successfully\n")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}\n")
    yield

# ------------------------------ APP ------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    description="Car rental booking API: fleet catalog, reservations and administration",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    debug=settings.api.debug,
)

register_exception_handlers(app)

# ------------------------------ CORS ------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.get_origins_list(),
    allow_credentials=settings.cors.credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------ ROUTERS ------------------------------
app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(cars_router, prefix="/api/cars", tags=["Cars"])
app.include_router(reservations_router, prefix="/api/reservations", tags=["Reservations"])
app.include_router(locations_router, prefix="/api/locations", tags=["Locations"])
app.include_router(users_router, prefix="/api/users", tags=["Users"])
app.include_router(stats_router, prefix="/api/stats", tags=["Stats"])

# ------------------------------ HEALTH ENDPOINTS ------------------------------
@app.get("/", tags=["Health"])
async def root():
    return {"message": settings.APP_NAME, "status": "running"}

@app.get("/health", tags=["Health"])
async def health(db: Session = Depends(get_db)):
    """Health check endpoint."""
    try:
        db.execute(text("SELECT 1"))
        database_status = "connected"
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        database_status = "disconnected"

    return {
        "status": "healthy",
        "database": database_status,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# ------------------------------ MAIN ------------------------------
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.api.host, port=settings.api.port, reload=settings.api.debug)

# ------------------------------ END OF FILE ------------------------------
