from fastapi import APIRouter, Depends

from app.core.errors import AuthenticationError
from app.core.logger import logger
from app.core.security import admin_sessions, credential_verifier, require_admin
from app.models.api_models import AdminLoginRequest, envelope

router = APIRouter()

@router.post("/admin/login")
async def admin_login(req: AdminLoginRequest):
    if not credential_verifier.verify(req.username, req.password):
        logger.warning("🔒 Failed admin login attempt")
        raise AuthenticationError("Invalid username or password")

    token = admin_sessions.create()
    logger.info("🔓 Admin logged in")
    return envelope(True, message="Login successful", data={"token": token})

@router.post("/admin/logout")
async def admin_logout(token: str = Depends(require_admin)):
    admin_sessions.revoke(token)
    logger.info("🔒 Admin logged out")
    return envelope(True, message="Logged out")
