"""
Saved Recipe Repository - user <-> recipe bookmark edges
"""

from typing import List, Optional, Set
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Recipe, SavedRecipe


class SavedRecipeRepository(BaseRepository[SavedRecipe]):
    """Repository for saved-recipe edges"""

    def __init__(self, db: Session):
        super().__init__(db, SavedRecipe)

    def get_edge(self, user_id: UUID, recipe_id: UUID) -> Optional[SavedRecipe]:
        return (
            self.db.query(SavedRecipe)
            .filter(SavedRecipe.user_id == user_id, SavedRecipe.recipe_id == recipe_id)
            .first()
        )

    def get_by_user_id(self, user_id: UUID) -> List[SavedRecipe]:
        """All edges of a user, newest first"""
        return (
            self.db.query(SavedRecipe)
            .filter(SavedRecipe.user_id == user_id)
            .order_by(SavedRecipe.created_at.desc())
            .all()
        )

    def get_recipe_ids(self, user_id: UUID) -> Set[UUID]:
        rows = (
            self.db.query(SavedRecipe.recipe_id)
            .filter(SavedRecipe.user_id == user_id)
            .all()
        )
        return {r.recipe_id for r in rows}

    def get_saved_recipes(self, user_id: UUID) -> List[Recipe]:
        """Recipes bookmarked by a user, most recently saved first"""
        return (
            self.db.query(Recipe)
            .join(SavedRecipe, SavedRecipe.recipe_id == Recipe.recipe_id)
            .filter(SavedRecipe.user_id == user_id)
            .order_by(SavedRecipe.created_at.desc())
            .all()
        )

    def create_edge(self, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        """Insert one edge (commits). Raises IntegrityError on a duplicate pair."""
        return self.create(SavedRecipe(user_id=user_id, recipe_id=recipe_id))

    def delete_by_user_and_recipe(self, user_id: UUID, recipe_id: UUID) -> int:
        """Delete the edge(s) for a pair (commits). Returns the number removed."""
        count = (
            self.db.query(SavedRecipe)
            .filter(SavedRecipe.user_id == user_id, SavedRecipe.recipe_id == recipe_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count
