"""
Recipe catalog models: recipes, reviews and saved-recipe edges.
"""

from sqlalchemy import (
    Column,
    Text,
    TIMESTAMP,
    ForeignKey,
    Integer,
    Float,
    Boolean,
    JSON,
    Uuid,
    CheckConstraint,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base
from domain.models.timestamps import utcnow


class Recipe(Base):
    """Catalog recipe.

    ``rating`` is derived: it always equals ``rating_sum / rating_count``
    (or 0 with no reviews). The running aggregate is maintained by
    ``services.rating_service.RatingService`` in the same transaction as
    the review mutation.
    """

    __tablename__ = "recipes"

    recipe_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    ingredients = Column(JSON, nullable=False)  # list[str]
    steps = Column(JSON, nullable=False)  # list[str]
    price = Column(Float, nullable=False)
    category = Column(Text, nullable=False)
    rating = Column(Float, nullable=False, default=0.0)
    rating_sum = Column(Integer, nullable=False, default=0)
    rating_count = Column(Integer, nullable=False, default=0)
    is_vegetarian = Column(Boolean, nullable=False, default=False)
    is_trending = Column(Boolean, nullable=False, default=False)
    is_recommended = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    reviews = relationship(
        "Review",
        back_populates="recipe",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    saved_by = relationship(
        "SavedRecipe",
        back_populates="recipe",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_recipe_price_nonneg"),
        CheckConstraint("rating_count >= 0", name="ck_recipe_rating_count_nonneg"),
    )


class Review(Base):
    """A single user's rating and comment for one recipe"""

    __tablename__ = "reviews"

    review_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("recipes.recipe_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rating = Column(Integer, nullable=False)
    text = Column(Text, nullable=False)
    user_name = Column(Text, nullable=False)  # denormalized at creation time
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    user = relationship("AppUser", back_populates="reviews")
    recipe = relationship("Recipe", back_populates="reviews")

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_review_rating_range"),
    )


class SavedRecipe(Base):
    """Bookmark edge between a user and a recipe"""

    __tablename__ = "saved_recipes"

    saved_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    recipe_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("recipes.recipe_id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    user = relationship("AppUser", back_populates="saved_recipes")
    recipe = relationship("Recipe", back_populates="saved_by")

    __table_args__ = (
        UniqueConstraint("user_id", "recipe_id", name="uq_saved_recipe_user_recipe"),
    )
