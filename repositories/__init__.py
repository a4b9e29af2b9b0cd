"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.recipe_repository import RecipeRepository
from repositories.review_repository import ReviewRepository
from repositories.saved_recipe_repository import SavedRecipeRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "RecipeRepository",
    "ReviewRepository",
    "SavedRecipeRepository",
]
