from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from domain.models import Review
from domain.schemas.review_schemas import ReviewCreate
from repositories import RecipeRepository, ReviewRepository, UserRepository
from services.rating_service import RatingService
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("cheffest.review")


class ReviewService:
    """Review mutations, each committed together with the recipe's rating aggregate"""

    @staticmethod
    def list_reviews(db: Session, recipe_id: UUID) -> List[Review]:
        """Reviews of a recipe, newest first.

        Also reconciles the recipe's stored rating with the review set and
        writes it back when they disagree.
        """
        recipe = RecipeRepository(db).get_by_id(recipe_id)
        if not recipe:
            raise NotFoundError("Recipe not found")

        reviews = ReviewRepository(db).get_by_recipe_id(recipe_id)
        rating_sum = sum(r.rating for r in reviews)
        if recipe.rating_sum != rating_sum or recipe.rating_count != len(reviews):
            logger.warning(
                f"rating_drift recipe_id={recipe_id} stored_count={recipe.rating_count} "
                f"actual_count={len(reviews)}"
            )
            try:
                RatingService.recompute(db, recipe_id)
                db.commit()
            except SQLAlchemyError:
                db.rollback()
                raise
        return reviews

    @staticmethod
    def list_all_reviews(db: Session) -> List[Review]:
        return ReviewRepository(db).get_all()

    @staticmethod
    def create_review(db: Session, data: ReviewCreate) -> Review:
        user = UserRepository(db).get_by_id(data.user_id)
        if not user:
            raise NotFoundError(f"User {data.user_id} not found")
        if not RecipeRepository(db).exists(data.recipe_id):
            raise NotFoundError("Recipe not found")

        user_name = (data.user_name or "").strip() or user.name
        review = Review(
            user_id=data.user_id,
            recipe_id=data.recipe_id,
            rating=data.rating,
            text=data.text,
            user_name=user_name,
        )
        try:
            ReviewRepository(db).add(review)
            RatingService.apply_review_added(db, data.recipe_id, data.rating)
            db.commit()
        except IntegrityError as e:
            db.rollback()
            logger.error(f"review_create_failed recipe_id={data.recipe_id} error={e}")
            raise ServiceValidationError("Review violates a database constraint")
        except Exception:
            db.rollback()
            logger.error(f"review_create_rolled_back recipe_id={data.recipe_id}")
            raise

        db.refresh(review)
        logger.info(
            f"review_created review_id={review.review_id} recipe_id={data.recipe_id} "
            f"rating={data.rating}"
        )
        return review

    @staticmethod
    def delete_review(db: Session, review_id: UUID) -> bool:
        """Delete a review and shift its recipe's aggregate. Returns False if missing."""
        repo = ReviewRepository(db)
        review = repo.get_by_id(review_id)
        if not review:
            return False

        recipe_id, rating = review.recipe_id, review.rating
        try:
            repo.remove(review)
            RatingService.apply_review_removed(db, recipe_id, rating)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(f"review_delete_rolled_back review_id={review_id}")
            raise
        logger.info(f"review_deleted review_id={review_id} recipe_id={recipe_id}")
        return True
