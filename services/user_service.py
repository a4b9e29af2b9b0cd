from typing import List, Optional
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from domain.models import AppUser, Review
from domain.schemas.user_schemas import UserCreate, UserUpdate
from repositories import UserRepository
from services.auth_service import hash_password
from services.rating_service import RatingService
from app.exceptions import NotFoundError

logger = logging.getLogger("cheffest.user")


class UserService:
    """Business logic for user accounts"""

    @staticmethod
    def get_user(db: Session, user_id: UUID) -> Optional[AppUser]:
        user = UserRepository(db).get_by_id(user_id)
        if user:
            logger.info(f"user_fetched user_id={user_id}")
        else:
            logger.warning(f"user_not_found user_id={user_id}")
        return user

    @staticmethod
    def list_users(db: Session) -> List[AppUser]:
        """All users, newest first (no pagination)."""
        return UserRepository(db).get_all()

    @staticmethod
    def create_or_sync_user(db: Session, data: UserCreate) -> AppUser:
        """Create a user, or update the existing one carrying the same id.

        Clients call this right after signing up with the identity provider,
        possibly more than once for the same account.
        """
        repo = UserRepository(db)
        avatar_url = str(data.avatar_url) if data.avatar_url else None
        password_hash = hash_password(data.password) if data.password else None

        existing = repo.get_by_id(data.id) if data.id else None
        if existing:
            changes = {"email": data.email, "name": data.name}
            if avatar_url is not None:
                changes["avatar_url"] = avatar_url
            if password_hash is not None:
                changes["password_hash"] = password_hash
            user = repo.update_user(existing, **changes)
            logger.info(f"user_synced user_id={user.user_id}")
            return user

        user = repo.create_user(
            email=data.email,
            name=data.name,
            user_id=data.id,
            avatar_url=avatar_url,
            password_hash=password_hash,
        )
        logger.info(f"user_created user_id={user.user_id} email={user.email}")
        return user

    @staticmethod
    def update_user(db: Session, user_id: UUID, data: UserUpdate) -> AppUser:
        repo = UserRepository(db)
        user = repo.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User {user_id} not found")
        changes = data.changes()
        if not changes:
            return user
        user = repo.update_user(user, **changes)
        logger.info(f"user_updated user_id={user_id} fields={','.join(sorted(changes))}")
        return user

    @staticmethod
    def delete_user(db: Session, user_id: UUID) -> bool:
        """Delete a user with their reviews and saved recipes. Returns True if deleted.

        Ratings of the recipes the user reviewed are rebuilt in the same
        transaction.
        """
        user = UserRepository(db).get_by_id(user_id)
        if not user:
            return False

        reviewed = {
            row.recipe_id
            for row in db.query(Review.recipe_id).filter(Review.user_id == user_id).all()
        }
        try:
            db.delete(user)
            db.flush()
            for recipe_id in reviewed:
                RatingService.recompute(db, recipe_id)
            db.commit()
        except Exception:
            db.rollback()
            logger.error(f"user_delete_rolled_back user_id={user_id}")
            raise
        logger.info(f"user_deleted user_id={user_id} recipes_rerated={len(reviewed)}")
        return True
