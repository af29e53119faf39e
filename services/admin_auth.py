"""
Admin account setup and login against the admin_users table.
"""
from __future__ import annotations

import logging
from typing import Any

from errors import AuthError, ConflictError
from schemas.admin import AdminLogin, AdminSetup
from schemas.validation import validate
from services import security
from services.storage import DatabaseStorage

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


async def setup_admin(storage: DatabaseStorage, payload: AdminSetup) -> dict[str, Any]:
    """Create the first admin. Refused once any admin exists."""
    if await storage.count_admin_users() > 0:
        raise ConflictError("Admin account already exists")
    password_hash = security.hash_password(payload.password)
    admin = await storage.create_admin_user(payload.username, password_hash)
    logger.info("Admin account created", extra={"username": admin.username})
    return {"success": True, "username": admin.username}


async def login(storage: DatabaseStorage, payload: AdminLogin) -> dict[str, Any]:
    admin = await storage.get_admin_user(payload.username)
    if admin is None or not security.verify_password(payload.password, admin.password_hash):
        logger.warning("Admin login rejected", extra={"username": payload.username})
        raise AuthError(INVALID_CREDENTIALS)
    token, expires_at = security.build_admin_token(admin.username)
    logger.info("Admin login", extra={"username": admin.username})
    return {
        "success": True,
        "token": token,
        "tokenType": "bearer",
        "expiresAt": expires_at.isoformat(),
    }


async def bootstrap_admin(storage: DatabaseStorage, username: str, password: str) -> bool:
    """Create an admin from configuration when none exists yet. Returns True if one was created."""
    if await storage.count_admin_users() > 0:
        return False
    result = validate(AdminSetup, {"username": username, "password": password})
    if not result.ok:
        logger.error(
            "ADMIN_USERNAME/ADMIN_PASSWORD rejected, no admin created: %s",
            "; ".join(f"{e.field}: {e.message}" for e in result.errors),
        )
        return False
    await setup_admin(storage, result.value)
    return True
