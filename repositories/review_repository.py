"""
Review Repository - Data access layer for recipe reviews
"""

from typing import List
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Review


class ReviewRepository(BaseRepository[Review]):
    """Repository for review data access"""

    def __init__(self, db: Session):
        super().__init__(db, Review)

    def get_by_recipe_id(self, recipe_id: UUID) -> List[Review]:
        """All reviews of a recipe, newest first"""
        return (
            self.db.query(Review)
            .filter(Review.recipe_id == recipe_id)
            .order_by(Review.created_at.desc())
            .all()
        )

    def get_ratings(self, recipe_id: UUID) -> List[int]:
        """Just the rating values of a recipe's reviews"""
        rows = self.db.query(Review.rating).filter(Review.recipe_id == recipe_id).all()
        return [r.rating for r in rows]

    def remove(self, review: Review) -> None:
        """Stage a review deletion. Does not commit."""
        self.db.delete(review)
        self.db.flush()
