"""Centralized exception handlers.

Maps domain and framework exceptions to JSON error bodies of the form
``{"statusCode": int, "message": str}``; validation failures also carry
``errors: [{field, message}]``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from offices.config import settings
from offices.domain.exceptions import NotFoundError, OfficesError, ValidationError

logger = logging.getLogger(__name__)


def _error_body(status_code: int, message: str, errors: list[dict] | None = None) -> dict:
    body = {"statusCode": status_code, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def _offices_error_handler(request: Request, exc: OfficesError) -> JSONResponse:
    if isinstance(exc, NotFoundError):
        return JSONResponse(status_code=404, content=_error_body(404, exc.message))
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=400,
            content=_error_body(400, exc.message, exc.details["errors"]),
        )
    return JSONResponse(status_code=400, content=_error_body(400, exc.message))


def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path/query/form values are reported like domain validation errors."""
    errors = [
        {"field": str(err["loc"][-1]) if err.get("loc") else "", "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=_error_body(400, "Request validation failed", errors),
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, str(exc.detail)),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    message = str(exc) if settings.debug else "Internal Server Error"
    return JSONResponse(status_code=500, content=_error_body(500, message))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OfficesError, _offices_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
