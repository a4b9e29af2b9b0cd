from pydantic import EmailStr, Field

from domain.schemas.base import CamelModel


class ContactForm(CamelModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    message: str = Field(..., min_length=10)
