"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from domain.enums import AdminRole
from domain.models import get_db_session
from app.exceptions import ForbiddenError, UnauthorizedError


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_admin_session(request: Request) -> dict | None:
    """Return the admin dict from the signed session cookie, or ``None``."""
    return request.session.get("admin")


def require_admin(request: Request) -> dict:
    """Raise 401 without a session, 403 when the session is not an admin."""
    admin = request.session.get("admin")
    if not admin:
        raise UnauthorizedError("Admin login required")
    if admin.get("role") != AdminRole.ADMIN.value:
        raise ForbiddenError("Admin access required")
    return admin
