"""
Global exception handlers.

SiteError subclasses map to their own status and code, request validation
failures become 400 with field-level details, and anything else is reduced
to a generic 500 so internals never reach the client.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errors import SiteError
from schemas.validation import field_errors

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Invalid input data"


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SiteError)
    async def site_error_handler(request: Request, exc: SiteError):
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            "%s on %s: %s",
            exc.code,
            request.url.path,
            exc.message,
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "entity": getattr(exc, "entity", None),
                "entity_id": getattr(exc, "entity_id", None),
            },
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = [e.to_dict() for e in field_errors(exc.errors())]
        logger.warning(
            "Validation error on %s: %s",
            request.url.path,
            ", ".join(d["field"] for d in details),
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": VALIDATION_MESSAGE,
                    "details": details,
                },
            },
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": {"code": "INTERNAL_ERROR", "message": "Internal server error"}},
        )
