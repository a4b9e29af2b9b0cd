#!/usr/bin/env python3
"""
Load sample recipes from data/recipes.json into the catalog.

Recipes are matched by title, so running the script again only inserts the
ones that are missing. Entries are validated with the same schema the API
uses for admin-created recipes.

Usage:
    python scripts/seed_recipes.py
    python scripts/seed_recipes.py --file path/to/recipes.json
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("seed_recipes")

DEFAULT_FILE = Path(__file__).parent.parent / "data" / "recipes.json"


def seed_recipes(path: Path = DEFAULT_FILE) -> int:
    """Insert recipes missing from the catalog; returns how many were added."""
    from domain.models import SessionLocal
    from domain.schemas.recipe_schemas import RecipeCreate
    from repositories import RecipeRepository

    with open(path, "r", encoding="utf-8") as f:
        entries = json.load(f)
    logger.info(f"Loaded {len(entries)} recipes from {path}")

    inserted = 0
    skipped = 0
    db = SessionLocal()
    try:
        repo = RecipeRepository(db)
        for entry in entries:
            try:
                data = RecipeCreate(**entry)
            except ValidationError as e:
                logger.warning(f"Invalid recipe {entry.get('title')!r}: {e.error_count()} errors")
                skipped += 1
                continue
            if repo.get_by_title(data.title):
                skipped += 1
                continue
            repo.create_recipe(**data.model_dump())
            inserted += 1
    finally:
        db.close()

    logger.info(f"Seed complete: inserted={inserted} skipped={skipped}")
    return inserted


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the Chef Fest recipe catalog")
    parser.add_argument("--file", type=Path, default=DEFAULT_FILE, help="JSON file to load")
    args = parser.parse_args(argv)

    if not args.file.exists():
        logger.error(f"Recipe file not found: {args.file}")
        return 1
    seed_recipes(args.file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
