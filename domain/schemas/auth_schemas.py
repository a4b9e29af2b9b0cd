from typing import Optional

from pydantic import Field

from domain.schemas.base import CamelModel


class AdminLoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AdminSessionResponse(CamelModel):
    authenticated: bool
    username: Optional[str] = None
