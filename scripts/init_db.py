#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the Chef Fest tables and optionally seeds the sample catalog.

Usage:
    python scripts/init_db.py            # create tables
    python scripts/init_db.py --seed     # create tables and load data/recipes.json
"""

import sys
import time
import logging
import argparse
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def init_tables() -> bool:
    """Create every table, retrying while the database comes up"""
    from app.config import settings
    from domain.models.database import init_database, engine

    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            init_database()
            break
        except SQLAlchemyError as e:
            logger.warning(
                f"Database init attempt {attempt}/{settings.db_init_attempts} failed: {e}"
            )
            if attempt == settings.db_init_attempts:
                logger.error("Failed to initialize database")
                return False
            time.sleep(settings.db_init_delay_sec)

    tables = inspect(engine).get_table_names()
    logger.info(f"Database ready with {len(tables)} tables: {', '.join(sorted(tables))}")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the Chef Fest database")
    parser.add_argument(
        "--seed", action="store_true", help="Load the sample recipes after creating tables"
    )
    args = parser.parse_args(argv)

    if not init_tables():
        return 1

    if args.seed:
        from scripts.seed_recipes import seed_recipes

        seed_recipes()
    return 0


if __name__ == "__main__":
    sys.exit(main())
