from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, Field

from domain.schemas.base import CamelModel


class SavedRecipeCreate(CamelModel):
    user_id: UUID
    recipe_id: UUID


class SavedRecipeResponse(CamelModel):
    id: UUID = Field(validation_alias=AliasChoices("saved_id", "id"))
    user_id: UUID
    recipe_id: UUID
    created_at: Optional[datetime] = None


class SavedRecipeRef(CamelModel):
    """Membership entry returned by the saved-recipes listing"""

    recipe_id: UUID
