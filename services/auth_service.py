"""
Password hashing and the admin credential check.

Admin credentials come from settings; the configured password is hashed
once with bcrypt on first use and login attempts are verified against
that hash.
"""

from functools import lru_cache
from typing import Optional
import logging

import bcrypt

from app.config import settings
from domain.enums import AdminRole

logger = logging.getLogger("cheffest.auth")


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode(), bcrypt.gensalt()).decode()


def verify_password(plain: str, hashed: str) -> bool:
    return bcrypt.checkpw(plain.encode(), hashed.encode())


@lru_cache(maxsize=4)
def _admin_password_hash(plain: str) -> str:
    return hash_password(plain)


def authenticate_admin(username: str, password: str) -> Optional[dict]:
    """Verify admin credentials. Returns ``{username, role}`` or ``None``."""
    expected = settings.admin_password.get_secret_value()
    if username != settings.admin_username:
        logger.warning("admin_login_failed reason=unknown_user")
        return None
    if not verify_password(password, _admin_password_hash(expected)):
        logger.warning("admin_login_failed reason=bad_password")
        return None
    logger.info(f"admin_login_succeeded username={username}")
    return {"username": username, "role": AdminRole.ADMIN.value}
