"""User management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db, require_admin
from api.responses import ErrorResponse, SuccessResponse
from domain.schemas.user_schemas import UserCreate, UserUpdate, UserResponse
from services.user_service import UserService
from app.exceptions import NotFoundError

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("cheffest.api.users")

NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Email already registered"}},
)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a user, or sync the profile of an existing id after sign-up."""
    return UserService.create_or_sync_user(db, user)


@router.get(
    "",
    response_model=List[UserResponse],
    dependencies=[Depends(require_admin)],
)
def get_all_users(db: Session = Depends(get_db)):
    """Return all users, newest first (admin only)."""
    return UserService.list_users(db)


@router.get("/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    user = UserService.get_user(db, user_id)
    if not user:
        raise NotFoundError(f"User {user_id} not found")
    return user


@router.patch("/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
def update_user(user_id: UUID, body: UserUpdate, db: Session = Depends(get_db)):
    """Update display name and/or avatar."""
    return UserService.update_user(db, user_id, body)


@router.delete(
    "/{user_id}",
    response_model=SuccessResponse,
    responses=NOT_FOUND,
    dependencies=[Depends(require_admin)],
)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    """Delete a user and all their reviews and saved recipes (admin only)."""
    if not UserService.delete_user(db, user_id):
        logger.warning(f"user_delete_missing user_id={user_id}")
        raise NotFoundError(f"User {user_id} not found")
    return {"success": True}
