"""
Shared FastAPI dependencies: the per-request storage facade and the admin gate.
"""
from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from database import get_db
from errors import AuthError
from services.security import AdminSession, AuthSecurityError, decode_admin_token
from services.storage import DatabaseStorage


async def get_storage(db: AsyncSession = Depends(get_db)) -> DatabaseStorage:
    return DatabaseStorage(db)


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise AuthError("Missing Authorization header")
    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise AuthError("Invalid Authorization header format")
    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise AuthError("Authorization must be: Bearer <token>")
    return token


async def require_admin(authorization: str | None = Header(default=None)) -> AdminSession:
    """Validate the admin bearer token on every admin-only request."""
    token = _extract_bearer_token(authorization)
    try:
        return decode_admin_token(token)
    except AuthSecurityError as exc:
        raise AuthError(str(exc)) from exc


async def optional_admin(authorization: str | None = Header(default=None)) -> AdminSession | None:
    """Admin session when a bearer token is sent, None for anonymous callers."""
    if authorization is None:
        return None
    return await require_admin(authorization)
