"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses. A missing store is the one error rendered as
HTML, since shoppers land on it from a browser.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.core.config import get_settings
from storefront.domain.exceptions import StorefrontException, TenantNotFoundError
from storefront.pages import render_store_not_found_page

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "TENANT_NOT_FOUND": 404,
    "ROUTE_NOT_FOUND": 404,
    "THEME_NOT_FOUND": 500,
    "INVALID_TENANT_ID": 500,
    "TEMPLATE_NOT_FOUND": 500,
    "TEMPLATE_RENDER_ERROR": 500,
    "SERVICE_UNAVAILABLE": 503,
    "STORAGE_UNAVAILABLE": 503,
    "STORAGE_PERMISSION_ERROR": 503,
    "REMOTE_SERVICE_ERROR": 502,
    "VALIDATION_ERROR": 400,
}


def status_for(exc: StorefrontException) -> int:
    """HTTP status for a domain exception (500 for unmapped codes)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 500)


def _storefront_exception_handler(
    request: Request, exc: StorefrontException
) -> Response:
    """Return JSON from StorefrontException.to_dict() with the mapped status code."""
    status = status_for(exc)
    settings = get_settings()
    if status >= 500:
        logger.error("%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.details)
    if isinstance(exc, TenantNotFoundError) and request.method == "GET":
        return HTMLResponse(
            content=render_store_not_found_page(
                exc.details.get("host", ""),
                platform_name=settings.platform_name,
                platform_url=settings.platform_url,
            ),
            status_code=status,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with field-level validation details."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: StorefrontException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(StorefrontException, _storefront_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
