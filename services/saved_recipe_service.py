from typing import List, Set
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from domain.models import Recipe, SavedRecipe
from repositories import RecipeRepository, SavedRecipeRepository, UserRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("cheffest.saved_recipes")


class SavedRecipeService:
    """Bookmark relation between users and recipes.

    At most one edge exists per (user, recipe): saving twice returns the
    existing edge, and the unique constraint settles concurrent saves.
    """

    @staticmethod
    def add(db: Session, user_id: UUID, recipe_id: UUID) -> SavedRecipe:
        if not UserRepository(db).exists(user_id):
            raise NotFoundError(f"User {user_id} not found")
        if not RecipeRepository(db).exists(recipe_id):
            raise NotFoundError("Recipe not found")

        repo = SavedRecipeRepository(db)
        existing = repo.get_edge(user_id, recipe_id)
        if existing:
            logger.info(f"recipe_already_saved user_id={user_id} recipe_id={recipe_id}")
            return existing

        try:
            edge = repo.create_edge(user_id, recipe_id)
        except IntegrityError:
            # lost a race against a concurrent save of the same pair
            db.rollback()
            edge = repo.get_edge(user_id, recipe_id)
            if edge is None:
                raise
        logger.info(f"recipe_saved user_id={user_id} recipe_id={recipe_id}")
        return edge

    @staticmethod
    def remove(db: Session, user_id: UUID, recipe_id: UUID) -> int:
        """Remove the edge; removing a missing edge is a successful no-op."""
        count = SavedRecipeRepository(db).delete_by_user_and_recipe(user_id, recipe_id)
        logger.info(
            f"recipe_unsaved user_id={user_id} recipe_id={recipe_id} removed={count}"
        )
        return count

    @staticmethod
    def list_edges(db: Session, user_id: UUID) -> List[SavedRecipe]:
        return SavedRecipeRepository(db).get_by_user_id(user_id)

    @staticmethod
    def list_for_user(db: Session, user_id: UUID) -> Set[UUID]:
        """Recipe ids saved by the user"""
        return SavedRecipeRepository(db).get_recipe_ids(user_id)

    @staticmethod
    def is_saved(db: Session, user_id: UUID, recipe_id: UUID) -> bool:
        return SavedRecipeRepository(db).get_edge(user_id, recipe_id) is not None

    @staticmethod
    def list_saved_recipes(db: Session, user_id: UUID) -> List[Recipe]:
        """The user's saved recipes materialized from the catalog"""
        return SavedRecipeRepository(db).get_saved_recipes(user_id)
