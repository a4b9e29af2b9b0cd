"""Pydantic schemas for catalog recipes."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import AliasChoices, Field, field_validator, model_validator

from domain.enums import PriceRange
from domain.schemas.base import CamelModel


def _clean_lines(values: List[str]) -> List[str]:
    """Drop blank entries and surrounding whitespace, keeping order."""
    return [v.strip() for v in values if v and v.strip()]


class RecipeCreate(CamelModel):
    """Body for creating a recipe. ``rating`` is derived and never accepted."""

    title: str = Field(..., min_length=1, json_schema_extra={"example": "Lemon Chicken"})
    description: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    ingredients: List[str] = Field(
        ..., json_schema_extra={"example": ["chicken thighs", "lemon", "garlic"]}
    )
    steps: List[str] = Field(
        ..., json_schema_extra={"example": ["Marinate the chicken", "Roast 35 minutes"]}
    )
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1, json_schema_extra={"example": "Main Course"})
    is_vegetarian: bool = False
    is_trending: bool = False
    is_recommended: bool = False

    @field_validator("title", "description", "image_url", "category")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("ingredients", "steps")
    @classmethod
    def non_empty_lines(cls, v: List[str]) -> List[str]:
        cleaned = _clean_lines(v)
        if not cleaned:
            raise ValueError("must contain at least one non-blank entry")
        return cleaned


class RecipeUpdate(CamelModel):
    """Partial update; only fields present in the body are changed."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = Field(None, min_length=1)
    ingredients: Optional[List[str]] = None
    steps: Optional[List[str]] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    is_vegetarian: Optional[bool] = None
    is_trending: Optional[bool] = None
    is_recommended: Optional[bool] = None

    @field_validator("title", "description", "image_url", "category")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("ingredients", "steps")
    @classmethod
    def non_empty_lines(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        cleaned = _clean_lines(v)
        if not cleaned:
            raise ValueError("must contain at least one non-blank entry")
        return cleaned

    @model_validator(mode="after")
    def no_explicit_nulls(self):
        nulls = [name for name in self.model_fields_set if getattr(self, name) is None]
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(sorted(nulls))}")
        return self

    def changes(self) -> dict:
        """Fields explicitly provided by the client, keyed by column name."""
        return self.model_dump(exclude_unset=True, by_alias=False)


class RecipeResponse(CamelModel):
    id: UUID = Field(validation_alias=AliasChoices("recipe_id", "id"))
    title: str
    description: str
    image_url: str
    ingredients: List[str]
    steps: List[str]
    price: float
    category: str
    rating: float
    review_count: int = Field(
        0, validation_alias=AliasChoices("rating_count", "review_count", "reviewCount")
    )
    is_vegetarian: bool
    is_trending: bool
    is_recommended: bool
    created_at: Optional[datetime] = None


class RecipeFilter(CamelModel):
    """Combined search/filter constraints for one query.

    Every field defaults to "no constraint"; active constraints are ANDed.
    """

    query: Optional[str] = None
    category: Optional[str] = None
    price_range: PriceRange = PriceRange.ALL
    vegetarian: bool = False
    trending: bool = False
    recommended: bool = False
    top_rated: bool = False

    @field_validator("price_range", mode="before")
    @classmethod
    def parse_price_range(cls, v):
        return PriceRange.parse(v)


class FilterOptionsResponse(CamelModel):
    categories: List[str]
    price_ranges: List[str]
