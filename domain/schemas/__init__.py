"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
    RecipeFilter,
    FilterOptionsResponse,
)
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from domain.schemas.review_schemas import ReviewCreate, ReviewResponse
from domain.schemas.saved_recipe_schemas import (
    SavedRecipeCreate,
    SavedRecipeResponse,
    SavedRecipeRef,
)
from domain.schemas.contact_schemas import ContactForm
from domain.schemas.auth_schemas import AdminLoginRequest, AdminSessionResponse

__all__ = [
    # Recipe schemas
    "RecipeCreate",
    "RecipeUpdate",
    "RecipeResponse",
    "RecipeFilter",
    "FilterOptionsResponse",
    # User schemas
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    # Review schemas
    "ReviewCreate",
    "ReviewResponse",
    # Saved recipe schemas
    "SavedRecipeCreate",
    "SavedRecipeResponse",
    "SavedRecipeRef",
    # Contact / admin
    "ContactForm",
    "AdminLoginRequest",
    "AdminSessionResponse",
]
