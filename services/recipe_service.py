from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from domain.enums import ALL_CATEGORIES, RECIPE_CATEGORIES, PriceRange
from domain.models import Recipe
from domain.schemas.recipe_schemas import RecipeCreate, RecipeUpdate, RecipeFilter
from repositories import RecipeRepository
from services.recipe_filter import filter_recipes
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("cheffest.recipe")


class RecipeService:
    """Business logic for the recipe catalog"""

    @staticmethod
    def list_recipes(db: Session, criteria: Optional[RecipeFilter] = None) -> List[Recipe]:
        """Newest-first catalog, optionally narrowed by a set of filter criteria."""
        recipes = RecipeRepository(db).list_all()
        if criteria is None:
            return recipes
        matched = filter_recipes(recipes, criteria)
        logger.info(f"recipes_filtered total={len(recipes)} matched={len(matched)}")
        return matched

    @staticmethod
    def get_recipe(db: Session, recipe_id: UUID) -> Recipe:
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            logger.warning(f"recipe_not_found recipe_id={recipe_id}")
            raise NotFoundError("Recipe not found")
        return recipe

    @staticmethod
    def create_recipe(db: Session, data: RecipeCreate) -> Recipe:
        repo = RecipeRepository(db)
        try:
            recipe = repo.create_recipe(**data.model_dump(by_alias=False))
        except IntegrityError as e:
            db.rollback()
            logger.error(f"recipe_create_failed title={data.title!r} error={e}")
            raise ServiceValidationError("Recipe violates a database constraint")
        logger.info(f"recipe_created recipe_id={recipe.recipe_id} title={recipe.title!r}")
        return recipe

    @staticmethod
    def update_recipe(db: Session, recipe_id: UUID, data: RecipeUpdate) -> Recipe:
        repo = RecipeRepository(db)
        recipe = repo.get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")

        changes = data.changes()
        if not changes:
            return recipe
        try:
            recipe = repo.update_fields(recipe, changes)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"recipe_update_failed recipe_id={recipe_id} error={e}")
            raise ServiceValidationError("Recipe violates a database constraint")
        logger.info(
            f"recipe_updated recipe_id={recipe_id} fields={','.join(sorted(changes))}"
        )
        return recipe

    @staticmethod
    def delete_recipe(db: Session, recipe_id: UUID) -> bool:
        """Delete a recipe with its reviews and saved edges. Returns True if deleted."""
        if RecipeRepository(db).delete(recipe_id):
            logger.info(f"recipe_deleted recipe_id={recipe_id}")
            return True
        return False

    @staticmethod
    def filter_options() -> dict:
        """Category labels and price ranges offered to clients"""
        return {
            "categories": [ALL_CATEGORIES] + RECIPE_CATEGORIES,
            "price_ranges": [p.value for p in PriceRange],
        }
