"""Exception handlers for the FastAPI application."""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()


def _envelope(status_code: int, error_code: str, message: Any, details: Any = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
    )


def _field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors, dropping the leading ``body``/``path`` location."""
    fields = []
    for error in exc.errors():
        loc = [str(part) for part in error["loc"]]
        if len(loc) > 1 and loc[0] in ("body", "path", "query", "header"):
            loc = loc[1:]
        fields.append({"field": ".".join(loc), "message": error["msg"], "type": error["type"]})
    return fields


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        """Send the exception's payload.

        That is the standard envelope, or the fixed body a profile or cart
        route has always returned.
        """
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "app_exception",
            error_code=exc.error_code.value,
            message=exc.message,
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(status_code=exc.status_code, content=exc.payload)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _envelope(exc.status_code, "HTTP_ERROR", exc.detail)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        fields = _field_errors(exc)
        logger.info("validation_error", path=request.url.path, fields=[f["field"] for f in fields])
        return _envelope(422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", fields)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Last resort: log with traceback, hide the message in production."""
        request_id = getattr(request.state, "request_id", "unknown")
        logger.error(
            "unhandled_exception",
            error_type=type(exc).__name__,
            request_id=request_id,
            exc_info=exc,
        )
        message = "An unexpected error occurred" if settings.is_production else str(exc)
        return _envelope(
            500,
            ErrorCode.INTERNAL_ERROR.value,
            message,
            {"request_id": request_id},
        )
