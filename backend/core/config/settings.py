# ------------------------------ IMPORTS ------------------------------
import os
import logging
from typing import List
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

# ------------------------------ CONFIGURATION CLASSES ------------------------------
@dataclass
class DatabaseConfig:
    """Database configuration."""
    url: str = os.getenv("DATABASE_URL", "")
    use_sqlite: bool = os.getenv("USE_SQLITE", "false").lower() == "true"
    sqlite_path: str = os.getenv("SQLITE_PATH", "./autowinajem.db")
    pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))

    def __post_init__(self):
        """Fall back to SQLite when no server URL is configured."""
        if not self.url:
            self.use_sqlite = True

    @property
    def database_url(self) -> str:
        """Get the appropriate database URL."""
        if self.use_sqlite:
            return f"sqlite:///{self.sqlite_path}"
        return self.url

@dataclass
class CORSConfig:
    """Allowed browser origins for the web client."""
    origins: str = os.getenv("CORS_ORIGINS", "*")
    credentials: bool = os.getenv("CORS_CREDENTIALS", "true").lower() == "true"

    def get_origins_list(self) -> List[str]:
        """Comma-separated CORS_ORIGINS as a list; '*' allows any origin."""
        origins = [origin.strip() for origin in self.origins.split(",") if origin.strip()]
        return origins if origins and "*" not in origins else ["*"]

@dataclass
class APIConfig:
    """Uvicorn bind address and debug switch."""
    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))
    debug: bool = os.getenv("API_DEBUG", "false").lower() in ("1", "true", "yes")

@dataclass
class BookingConfig:
    """Booking behaviour switches."""
    release_car_on_close: bool = os.getenv("RELEASE_CAR_ON_CLOSE", "false").lower() == "true"
    seed_on_startup: bool = os.getenv("SEED_ON_STARTUP", "false").lower() == "true"

# ------------------------------ MAIN SETTINGS CLASS ------------------------------

class Settings:
    """Main application settings."""

    APP_NAME: str = "AutoWinajem API"
    APP_VERSION: str = "1.0.0"

    def __init__(self):
        self.database = DatabaseConfig()
        self.cors = CORSConfig()
        self.api = APIConfig()
        self.booking = BookingConfig()

        self._setup_logging()

    def _setup_logging(self):
        """Configure application logging."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

# ------------------------------ GLOBAL SETTINGS INSTANCE ------------------------------
settings = Settings()

# ------------------------------ END OF FILE ------------------------------
