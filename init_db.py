"""
Database initialization script.
Creates the posts and comments tables, optionally through Alembic, and can
load sample data.
Run this as: python init_db.py [--migrate] [--seed]
"""

import argparse
import logging
import sys

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("db-init")

from app.core.config import settings
from app.db.init_db import create_all_tables, init_db, seed_sample_data
from app.db.session import SessionLocal

def main():
    parser = argparse.ArgumentParser(description="Initialize the posts database")
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations instead of creating tables directly"
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert sample posts and comments into an empty database"
    )
    args = parser.parse_args()

    logger.info(f"Initializing database at: {settings.DATABASE_URL}")

    if args.migrate:
        init_db()
    elif not create_all_tables():
        logger.error("Database initialization failed")
        sys.exit(1)

    if args.seed:
        db = SessionLocal()
        try:
            seed_sample_data(db)
        finally:
            db.close()

    logger.info("Database initialization completed successfully")

if __name__ == "__main__":
    main()
