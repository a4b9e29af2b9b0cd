"""Tests for the operational scripts (table creation and catalog seeding)."""

from sqlalchemy.orm import Session

from test_fixtures import db_session
from domain.models import Recipe
from scripts.init_db import init_tables
from scripts.seed_recipes import seed_recipes, DEFAULT_FILE


def test_init_tables_is_repeatable():
    assert init_tables() is True
    assert init_tables() is True


def test_seed_recipes_inserts_once(db_session: Session):
    first = seed_recipes(DEFAULT_FILE)
    second = seed_recipes(DEFAULT_FILE)

    assert first == 8
    assert second == 0
    assert db_session.query(Recipe).count() == 8
    assert all(r.rating == 0.0 for r in db_session.query(Recipe).all())


def test_seed_recipes_skips_invalid_entries(tmp_path, db_session: Session):
    path = tmp_path / "recipes.json"
    path.write_text(
        '[{"title": "No Steps", "description": "x", "imageUrl": "x",'
        ' "ingredients": ["a"], "steps": [], "price": 1, "category": "Soup"}]',
        encoding="utf-8",
    )

    assert seed_recipes(path) == 0
    assert db_session.query(Recipe).count() == 0
