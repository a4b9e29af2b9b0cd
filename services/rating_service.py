"""
Rating aggregation.

A recipe's rating is the arithmetic mean of its review ratings, or 0 when it
has no reviews. The recipe row carries a running ``(rating_sum, rating_count)``
aggregate that is shifted atomically in the same transaction as each review
insert or delete; ``recompute`` rebuilds it from a full scan.
"""

from typing import Iterable
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from repositories import RecipeRepository, ReviewRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("cheffest.rating")


def mean_rating(ratings: Iterable[int]) -> float:
    """Mean of the given ratings; exactly 0.0 for none."""
    total = 0
    count = 0
    for r in ratings:
        total += r
        count += 1
    if count == 0:
        return 0.0
    return total / count


class RatingService:
    """Keeps ``Recipe.rating`` consistent with the recipe's reviews.

    None of these methods commit: callers commit the review mutation and the
    aggregate change together.
    """

    @staticmethod
    def apply_review_added(db: Session, recipe_id: UUID, rating: int) -> None:
        rows = RecipeRepository(db).apply_rating_delta(recipe_id, rating, 1)
        if rows == 0:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        logger.debug(f"rating_aggregate_added recipe_id={recipe_id} rating={rating}")

    @staticmethod
    def apply_review_removed(db: Session, recipe_id: UUID, rating: int) -> None:
        rows = RecipeRepository(db).apply_rating_delta(recipe_id, -rating, -1)
        if rows == 0:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        logger.debug(f"rating_aggregate_removed recipe_id={recipe_id} rating={rating}")

    @staticmethod
    def recompute(db: Session, recipe_id: UUID) -> float:
        """Rebuild the aggregate from every review of the recipe; returns the new rating"""
        ratings = ReviewRepository(db).get_ratings(recipe_id)
        rating = mean_rating(ratings)
        rows = RecipeRepository(db).set_rating_aggregate(
            recipe_id, sum(ratings), len(ratings), rating
        )
        if rows == 0:
            raise NotFoundError(f"Recipe {recipe_id} not found")
        logger.info(
            f"rating_recomputed recipe_id={recipe_id} reviews={len(ratings)} rating={rating}"
        )
        return rating
