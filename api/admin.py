from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_storage, require_admin
from schemas.admin import AdminLogin, AdminSetup
from services import admin_auth
from services.security import AdminSession
from services.storage import DatabaseStorage

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/setup", status_code=201)
async def setup_admin(body: AdminSetup, storage: DatabaseStorage = Depends(get_storage)) -> dict[str, Any]:
    return await admin_auth.setup_admin(storage, body)


@router.post("/login")
async def login(body: AdminLogin, storage: DatabaseStorage = Depends(get_storage)) -> dict[str, Any]:
    return await admin_auth.login(storage, body)


@router.get("/session")
async def get_session(session: AdminSession = Depends(require_admin)) -> dict[str, Any]:
    return {"username": session.username, "expiresAt": session.expires_at.isoformat()}
