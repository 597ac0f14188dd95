"""
Exception handlers — render errors as ``{statusCode, message, error}`` JSON.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth.exceptions import AuthError

logger = logging.getLogger(__name__)


def _error_body(status_code: int, message) -> dict:
    return {
        "statusCode": status_code,
        "message": message,
        "error": HTTPStatus(status_code).phrase,
    }


def _format_validation_error(err: dict) -> str:
    field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
    return f"{field}: {err.get('msg', 'invalid value')}" if field else err.get("msg", "invalid value")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the JSON error handlers to ``app``."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        messages = [_format_validation_error(err) for err in exc.errors()]
        logger.debug("Validation failed on %s: %s", request.url.path, messages)
        return JSONResponse(status_code=400, content=_error_body(400, messages))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, exc.detail),
            headers=getattr(exc, "headers", None),
        )
