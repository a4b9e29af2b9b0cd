"""
Recipe Repository - Data access layer for catalog recipes.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import Float, case, cast, update
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipe data access"""

    # Columns a client may write; rating columns are derived from reviews.
    WRITABLE_FIELDS = frozenset(
        {
            "title",
            "description",
            "image_url",
            "ingredients",
            "steps",
            "price",
            "category",
            "is_vegetarian",
            "is_trending",
            "is_recommended",
        }
    )

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def list_all(self) -> List[Recipe]:
        """Full catalog snapshot, newest first"""
        return self.get_all()

    def get_by_title(self, title: str) -> Optional[Recipe]:
        return self.db.query(Recipe).filter(Recipe.title == title).first()

    def create_recipe(self, **fields) -> Recipe:
        """Insert a recipe with a zero rating aggregate"""
        data = {k: v for k, v in fields.items() if k in self.WRITABLE_FIELDS}
        recipe = Recipe(rating=0.0, rating_sum=0, rating_count=0, **data)
        return self.create(recipe)

    def update_fields(self, recipe: Recipe, changes: dict) -> Recipe:
        """Apply a partial update; unknown and derived columns are ignored"""
        for key, value in changes.items():
            if key in self.WRITABLE_FIELDS:
                setattr(recipe, key, value)
        return self.update(recipe)

    def apply_rating_delta(self, recipe_id: UUID, sum_delta: int, count_delta: int) -> int:
        """Atomically shift the running rating aggregate.

        Single UPDATE, so concurrent review writes cannot lose an update.
        Does not commit. Returns the number of rows touched (0 if the
        recipe does not exist).
        """
        new_sum = Recipe.rating_sum + sum_delta
        new_count = Recipe.rating_count + count_delta
        stmt = (
            update(Recipe)
            .where(Recipe.recipe_id == recipe_id)
            .values(
                rating_sum=new_sum,
                rating_count=new_count,
                rating=case(
                    (new_count > 0, cast(new_sum, Float) / new_count),
                    else_=0.0,
                ),
            )
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return result.rowcount

    def set_rating_aggregate(
        self, recipe_id: UUID, rating_sum: int, rating_count: int, rating: float
    ) -> int:
        """Overwrite the aggregate with values computed from a full rescan. Does not commit."""
        stmt = (
            update(Recipe)
            .where(Recipe.recipe_id == recipe_id)
            .values(rating_sum=rating_sum, rating_count=rating_count, rating=rating)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return result.rowcount
