"""Admin session routes (login, logout, session status)"""

from fastapi import APIRouter, Depends, Request
import logging

from api.dependencies import get_admin_session
from api.responses import ErrorResponse, SuccessResponse
from domain.schemas.auth_schemas import AdminLoginRequest, AdminSessionResponse
from services.auth_service import authenticate_admin
from app.exceptions import UnauthorizedError

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger("cheffest.api.admin")


@router.post(
    "/login",
    response_model=AdminSessionResponse,
    responses={401: {"model": ErrorResponse, "description": "Invalid credentials"}},
)
def login(body: AdminLoginRequest, request: Request):
    """Verify admin credentials and start a signed-cookie session."""
    admin = authenticate_admin(body.username, body.password)
    if not admin:
        logger.warning(f"admin_login_failed username={body.username!r}")
        raise UnauthorizedError("Invalid username or password")
    request.session["admin"] = admin
    logger.info(f"admin_login username={admin['username']}")
    return AdminSessionResponse(authenticated=True, username=admin["username"])


@router.post("/logout", response_model=SuccessResponse)
def logout(request: Request):
    admin = request.session.pop("admin", None)
    if admin:
        logger.info(f"admin_logout username={admin.get('username')}")
    return {"success": True}


@router.get("/session", response_model=AdminSessionResponse)
def session_status(admin: dict | None = Depends(get_admin_session)):
    if not admin:
        return AdminSessionResponse(authenticated=False)
    return AdminSessionResponse(authenticated=True, username=admin.get("username"))
