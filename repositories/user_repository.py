"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def create_user(
        self,
        email: str,
        name: str,
        user_id: Optional[UUID] = None,
        avatar_url: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> AppUser:
        """Create a new user"""
        user = AppUser(
            email=email.strip().lower(),
            name=name,
            avatar_url=avatar_url,
            password_hash=password_hash,
        )
        if user_id is not None:
            user.user_id = user_id
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")

    def update_user(self, user: AppUser, **changes) -> AppUser:
        """Apply column changes and commit"""
        for key, value in changes.items():
            if hasattr(user, key):
                setattr(user, key, value)
        if "email" in changes:
            user.email = changes["email"].strip().lower()
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {user.email} already exists")
        self.db.refresh(user)
        return user

