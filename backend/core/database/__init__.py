# ------------------------------ IMPORTS ------------------------------
from .connection import get_db, get_db_session, init_db, drop_db, engine, Base, SessionLocal

__all__ = ["get_db", "get_db_session", "init_db", "drop_db", "engine", "Base", "SessionLocal"]
