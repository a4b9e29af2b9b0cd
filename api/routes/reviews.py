"""Review routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID
import logging

from api.dependencies import get_db, require_admin
from api.responses import ErrorResponse, SuccessResponse
from domain.schemas.review_schemas import ReviewCreate, ReviewResponse
from services.review_service import ReviewService
from app.exceptions import NotFoundError

router = APIRouter(tags=["Reviews"])
logger = logging.getLogger("cheffest.api.reviews")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recipe or review not found"}}


@router.get("/reviews/{recipe_id}", response_model=List[ReviewResponse], responses=NOT_FOUND)
def list_reviews(recipe_id: UUID, db: Session = Depends(get_db)):
    """Reviews of a recipe, newest first. Re-syncs the recipe's rating if it drifted."""
    return ReviewService.list_reviews(db, recipe_id)


@router.get(
    "/all-reviews",
    response_model=List[ReviewResponse],
    dependencies=[Depends(require_admin)],
)
def list_all_reviews(db: Session = Depends(get_db)):
    """Every review in the catalog, newest first (admin only)."""
    return ReviewService.list_all_reviews(db)


@router.post(
    "/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
def create_review(review: ReviewCreate, db: Session = Depends(get_db)):
    """Create a review and update the recipe's rating in the same transaction."""
    return ReviewService.create_review(db, review)


@router.delete(
    "/reviews/{review_id}",
    response_model=SuccessResponse,
    responses=NOT_FOUND,
    dependencies=[Depends(require_admin)],
)
def delete_review(review_id: UUID, db: Session = Depends(get_db)):
    """Delete a review and update the recipe's rating (admin only)."""
    if not ReviewService.delete_review(db, review_id):
        logger.warning(f"review_delete_missing review_id={review_id}")
        raise NotFoundError(f"Review {review_id} not found")
    return {"success": True}
