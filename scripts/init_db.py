#!/usr/bin/env python3
"""
Initialize the CookingRecipes PostgreSQL schema and optionally seed lookup data
(recipe categories and ingredient units).
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")

DEFAULT_CATEGORIES = ["Soups", "Salads", "Main courses", "Desserts", "Baking", "Drinks"]
DEFAULT_UNITS = ["g", "kg", "ml", "l", "pcs", "tsp", "tbsp", "cup"]


def init_schema() -> None:
    from sqlalchemy import inspect
    from domain.models import engine, init_database
    from domain.models.database import SCHEMA

    init_database()
    tables = inspect(engine).get_table_names(schema=SCHEMA)
    logger.info(f"Schema {SCHEMA} has {len(tables)} tables: {', '.join(sorted(tables))}")


def seed_lookups() -> None:
    from domain.models import SessionLocal
    from repositories import RecipeCategoryRepository, IngredientUnitRepository

    db = SessionLocal()
    try:
        categories = RecipeCategoryRepository(db)
        for name in DEFAULT_CATEGORIES:
            categories.get_or_create(name)
        units = IngredientUnitRepository(db)
        for name in DEFAULT_UNITS:
            units.get_or_create(name)
        logger.info(
            f"Seeded {len(DEFAULT_CATEGORIES)} categories and {len(DEFAULT_UNITS)} units"
        )
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--seed", action="store_true", help="Insert default categories and units"
    )
    args = parser.parse_args(argv)

    from sqlalchemy.exc import SQLAlchemyError

    try:
        init_schema()
        if args.seed:
            seed_lookups()
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
