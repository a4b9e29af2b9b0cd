"""Saved recipe (bookmark) routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.dependencies import get_db
from api.responses import SuccessResponse
from domain.schemas.recipe_schemas import RecipeResponse
from domain.schemas.saved_recipe_schemas import (
    SavedRecipeCreate,
    SavedRecipeResponse,
    SavedRecipeRef,
)
from services.saved_recipe_service import SavedRecipeService

router = APIRouter(prefix="/saved-recipes", tags=["Saved Recipes"])


@router.get("/{user_id}", response_model=List[SavedRecipeRef])
def list_saved(user_id: UUID, db: Session = Depends(get_db)):
    """Ids of the recipes a user saved, most recent first."""
    return [
        SavedRecipeRef(recipe_id=edge.recipe_id)
        for edge in SavedRecipeService.list_edges(db, user_id)
    ]


@router.get("/{user_id}/recipes", response_model=List[RecipeResponse])
def list_saved_recipes(user_id: UUID, db: Session = Depends(get_db)):
    """Full recipes a user saved, most recently saved first."""
    return SavedRecipeService.list_saved_recipes(db, user_id)


@router.post("", response_model=SavedRecipeResponse, status_code=status.HTTP_201_CREATED)
def save_recipe(body: SavedRecipeCreate, db: Session = Depends(get_db)):
    """Save a recipe for a user. Saving an already saved recipe returns the existing entry."""
    return SavedRecipeService.add(db, body.user_id, body.recipe_id)


@router.delete("/{user_id}/{recipe_id}", response_model=SuccessResponse)
def unsave_recipe(user_id: UUID, recipe_id: UUID, db: Session = Depends(get_db)):
    """Remove a saved recipe; succeeds even when nothing was saved."""
    SavedRecipeService.remove(db, user_id, recipe_id)
    return {"success": True}
