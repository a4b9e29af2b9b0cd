"""
Recipe routes - catalog listing, search/filter and admin CRUD.
"""

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
import logging

from api.dependencies import get_db, require_admin
from api.middleware import summarize_validation_errors
from api.responses import ErrorResponse, SuccessResponse
from domain.schemas.recipe_schemas import (
    RecipeCreate,
    RecipeUpdate,
    RecipeResponse,
    RecipeFilter,
    FilterOptionsResponse,
)
from services.recipe_service import RecipeService
from app.exceptions import NotFoundError, ServiceValidationError

router = APIRouter(prefix="/recipes", tags=["Recipes"])
logger = logging.getLogger("cheffest.api.recipes")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recipe not found"}}


@router.get("", response_model=List[RecipeResponse])
def list_recipes(
    q: Optional[str] = Query(
        default=None, description="Search in title, description and ingredients"
    ),
    category: Optional[str] = Query(default=None, description="Exact category, or All"),
    price_range: Optional[str] = Query(
        default=None, alias="priceRange", description="All, under-10, 10-20, 20-30, over-30"
    ),
    vegetarian: bool = Query(default=False),
    trending: bool = Query(default=False),
    recommended: bool = Query(default=False),
    top_rated: bool = Query(default=False, alias="topRated"),
    db: Session = Depends(get_db),
):
    """
    List recipes, newest first.

    - **q**: case-insensitive substring of title, description or any ingredient
    - **category**: exact category label ("All" for no constraint)
    - **priceRange**: price bracket
    - **vegetarian / trending / recommended**: require the flag
    - **topRated**: require a rating of at least 4.5
    """
    try:
        criteria = RecipeFilter(
            query=q,
            category=category,
            price_range=price_range,
            vegetarian=vegetarian,
            trending=trending,
            recommended=recommended,
            top_rated=top_rated,
        )
    except ValidationError as e:
        logger.warning(f"recipe_filter_rejected price_range={price_range!r}")
        raise ServiceValidationError(summarize_validation_errors(e.errors()))
    return RecipeService.list_recipes(db, criteria)


@router.get("/categories", response_model=FilterOptionsResponse)
def get_filter_options():
    """Category labels and price ranges accepted by the listing filters."""
    return RecipeService.filter_options()


@router.get("/{recipe_id}", response_model=RecipeResponse, responses=NOT_FOUND)
def get_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    return RecipeService.get_recipe(db, recipe_id)


@router.post(
    "",
    response_model=RecipeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_recipe(recipe: RecipeCreate, db: Session = Depends(get_db)):
    """Create a recipe (admin only). New recipes start with a rating of 0."""
    return RecipeService.create_recipe(db, recipe)


@router.patch(
    "/{recipe_id}",
    response_model=RecipeResponse,
    responses=NOT_FOUND,
    dependencies=[Depends(require_admin)],
)
def update_recipe(recipe_id: UUID, recipe: RecipeUpdate, db: Session = Depends(get_db)):
    """Partially update a recipe (admin only)."""
    return RecipeService.update_recipe(db, recipe_id, recipe)


@router.delete(
    "/{recipe_id}",
    response_model=SuccessResponse,
    responses=NOT_FOUND,
    dependencies=[Depends(require_admin)],
)
def delete_recipe(recipe_id: UUID, db: Session = Depends(get_db)):
    """Delete a recipe together with its reviews and saved entries (admin only)."""
    if not RecipeService.delete_recipe(db, recipe_id):
        logger.warning(f"recipe_delete_missing recipe_id={recipe_id}")
        raise NotFoundError("Recipe not found")
    return {"success": True}
