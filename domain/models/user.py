"""
User account model.
"""

from sqlalchemy import Column, Text, TIMESTAMP, Uuid
from sqlalchemy.orm import relationship
import uuid

from domain.models.database import Base
from domain.models.timestamps import utcnow


class AppUser(Base):
    """User account model"""

    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    name = Column(Text, nullable=False)
    avatar_url = Column(Text)
    password_hash = Column(Text)  # NULL for federated-login accounts
    created_at = Column(TIMESTAMP(timezone=True), default=utcnow, nullable=False)

    # Relationships
    reviews = relationship(
        "Review",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    saved_recipes = relationship(
        "SavedRecipe",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
