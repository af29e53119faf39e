"""
Error hierarchy for the site API.

Every error carries a stable code and the HTTP status it maps to; the global
handlers in api/error_handlers.py turn them into the shared JSON envelope.
Messages are safe to show to clients.
"""
from typing import Any, Optional


class SiteError(Exception):
    """Base class for errors the API answers with a structured response."""

    code = "SITE_ERROR"
    http_status = 500

    def __init__(self, message: str, details: Optional[list[dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict[str, Any]:
        body: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return {"error": body}


class NotFoundError(SiteError):
    code = "NOT_FOUND"
    http_status = 404

    def __init__(self, entity: str, entity_id: Any = None):
        message = f"{entity} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id


class StorageUnavailableError(SiteError):
    code = "STORAGE_UNAVAILABLE"
    http_status = 500

    def __init__(self, message: str = "Storage unavailable"):
        super().__init__(message)


class AuthError(SiteError):
    code = "AUTH_FAILED"
    http_status = 401

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class ConflictError(SiteError):
    code = "CONFLICT"
    http_status = 409
