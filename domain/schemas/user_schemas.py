from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AliasChoices, EmailStr, Field, HttpUrl, field_validator, model_validator

from domain.schemas.base import CamelModel


class UserCreate(CamelModel):
    """Create a user, or sync one that signed up with the identity provider.

    ``id`` is the identity provider's user id when present; the password is
    absent for federated logins.
    """

    id: Optional[UUID] = None
    email: EmailStr
    name: str = Field(..., min_length=2)
    avatar_url: Optional[HttpUrl] = None
    password: Optional[str] = Field(None, min_length=6)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("name must have at least 2 characters")
        return v


class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=2)
    avatar_url: Optional[HttpUrl] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if len(v) < 2:
            raise ValueError("name must have at least 2 characters")
        return v

    @model_validator(mode="after")
    def name_not_null(self):
        # avatar_url may be cleared with null, name may not
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name cannot be null")
        return self

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True, by_alias=False)
        if data.get("avatar_url") is not None:
            data["avatar_url"] = str(data["avatar_url"])
        return data


class UserResponse(CamelModel):
    id: UUID = Field(validation_alias=AliasChoices("user_id", "id"))
    email: str
    name: str
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
