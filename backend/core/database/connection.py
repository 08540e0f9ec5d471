# ------------------------------ IMPORTS ------------------------------
from contextlib import contextmanager
from typing import Generator
import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from core.config.settings import settings

# ------------------------------ LOGGING ------------------------------
logger = logging.getLogger(__name__)

# ------------------------------ BASE CLASS ------------------------------
Base = declarative_base()

# ------------------------------ DATABASE ENGINE ------------------------------

def _use_immediate_transactions(sqlite_engine: Engine) -> None:
    """Open SQLite transactions with BEGIN IMMEDIATE so concurrent writers queue on the lock."""

    @event.listens_for(sqlite_engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(sqlite_engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

def create_database_engine(database_url: str = None) -> Engine:
    """Create and configure the database engine."""
    database_url = database_url or settings.database.database_url

    if database_url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool, echo=False)

        sqlite_engine = create_engine(database_url, connect_args=connect_args, echo=False)
        _use_immediate_transactions(sqlite_engine)
        return sqlite_engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        echo=False
    )

engine = create_database_engine()

# ------------------------------ SESSION FACTORY ------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ------------------------------ DATABASE FUNCTIONS ------------------------------

def get_db() -> Generator[Session, None, None]:
    """Dependency for FastAPI to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic commit/rollback.

    Example:
        with get_db_session() as db:
            car = db.query(Car).first()
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()

def init_db(bind: Engine = None) -> None:
    """Initialize database - create all tables."""
    try:
        from core.database.models import User, Car, Reservation, Location  # noqa: F401
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created successfully")

    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        raise

def drop_db(bind: Engine = None) -> None:
    """Drop all database tables."""
    from core.database.models import User, Car, Reservation, Location  # noqa: F401
    Base.metadata.drop_all(bind=bind or engine)
    logger.info("Database tables dropped")

# ------------------------------ END OF FILE ------------------------------
