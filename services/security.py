"""
Admin credential and session helpers.

Passwords are stored as bcrypt hashes. A successful login yields a signed,
expiring JWT; every admin-only request presents it as a bearer token and gets
back an AdminSession describing who is acting until when.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from config import settings

TOKEN_TYPE = "admin"


class AuthSecurityError(RuntimeError):
    pass


@dataclass(frozen=True)
class AdminSession:
    username: str
    expires_at: datetime


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        return False


def build_admin_token(username: str, now: Optional[datetime] = None) -> tuple[str, datetime]:
    issued_at = now or datetime.now(timezone.utc)
    expires_at = issued_at + timedelta(minutes=settings.admin_session_minutes)
    payload = {
        "sub": username,
        "type": TOKEN_TYPE,
        "iat": int(issued_at.timestamp()),
        "exp": int(expires_at.timestamp()),
    }
    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    return token, expires_at.replace(microsecond=0)


def decode_admin_token(token: str) -> AdminSession:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Session token is empty.")

    try:
        payload = jwt.decode(raw, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.ExpiredSignatureError as exc:
        raise AuthSecurityError("Session has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid session token.") from exc

    if payload.get("type") != TOKEN_TYPE:
        raise AuthSecurityError("Token is not an admin session.")
    username = str(payload.get("sub") or "").strip()
    if not username:
        raise AuthSecurityError("Invalid session subject.")
    return AdminSession(
        username=username,
        expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
    )
