"""Services package - Business logic layer"""

from services.recipe_service import RecipeService
from services.review_service import ReviewService
from services.rating_service import RatingService
from services.saved_recipe_service import SavedRecipeService
from services.user_service import UserService
from services.contact_service import ContactService

# Note: recipe_filter, rating_service.mean_rating and auth_service are plain functions

__all__ = [
    "RecipeService",
    "ReviewService",
    "RatingService",
    "SavedRecipeService",
    "UserService",
    "ContactService",
]
