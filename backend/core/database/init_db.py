# ------------------------------ IMPORTS ------------------------------
"""
Database initialization script.

Run this script to create all database tables.
Usage: python -m core.database.init_db [--reset] [--seed]
"""
import argparse
import sys
import logging

from core.database.connection import init_db, drop_db, get_db_session
from core.database.seed import seed_database
from core.config.settings import settings

# ------------------------------ LOGGING ------------------------------
logger = logging.getLogger(__name__)

# ------------------------------ MAIN ------------------------------

def main(argv=None):
    """Initialize database tables."""
    parser = argparse.ArgumentParser(description="Create the AutoWinajem database schema")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    parser.add_argument("--seed", action="store_true", help="Insert demo data into an empty database")
    args = parser.parse_args(argv)

    try:
        url = settings.database.database_url
        logger.info(f"Database URL: {url.split('@')[1] if '@' in url else url}")

        if args.reset:
            drop_db()
        init_db()

        if args.seed:
            with get_db_session() as db:
                seed_database(db)

        logger.info("Database initialized successfully!")

    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()

# ------------------------------ END OF FILE ------------------------------
