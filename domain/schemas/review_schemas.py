from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, Field, field_validator

from domain.schemas.base import CamelModel


class ReviewCreate(CamelModel):
    user_id: UUID
    recipe_id: UUID
    rating: int = Field(..., ge=1, le=5)
    text: str = Field(..., min_length=1)
    # Display name captured at creation; defaults to the user's current name.
    user_name: Optional[str] = None

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("review text must not be blank")
        return v


class ReviewResponse(CamelModel):
    id: UUID = Field(validation_alias=AliasChoices("review_id", "id"))
    user_id: UUID
    recipe_id: UUID
    rating: int
    text: str
    user_name: str
    created_at: Optional[datetime] = None
