"""Tests for domain exceptions and their HTTP status mapping."""

import pytest

from storefront.core.exception_handlers import status_for
from storefront.domain.exceptions import (
    InvalidTenantIdError,
    RemoteServiceError,
    RouteNotFoundError,
    ServiceUnavailableError,
    StorefrontException,
    TemplateNotFoundError,
    TemplateRenderError,
    TenantNotFoundError,
    ThemeNotFoundError,
    ValidationException,
)
from storefront.infrastructure.exceptions import (
    StorageNotFoundError,
    StoragePermissionError,
    StorageReadError,
)


def test_base_exception_defaults() -> None:
    exc = StorefrontException("Something failed")
    assert exc.error_code == "StorefrontException"
    assert exc.details == {}
    assert exc.to_dict() == {"error": "StorefrontException", "message": "Something failed", "details": {}}


def test_tenant_not_found() -> None:
    exc = TenantNotFoundError("shop.test")
    assert exc.error_code == "TENANT_NOT_FOUND"
    assert exc.details == {"host": "shop.test"}


def test_route_not_found_messages() -> None:
    assert RouteNotFoundError("/x").message == "Page not found"
    exc = RouteNotFoundError("/collections/a", "collection", "a")
    assert exc.message == "Collection not found"
    assert exc.details == {"path": "/collections/a", "resource": "collection", "handle": "a"}


def test_remote_service_error_status_code_optional() -> None:
    assert "status_code" not in RemoteServiceError("checkout-service", "timeout").details
    assert RemoteServiceError("checkout-service", "HTTP 500", 500).details["status_code"] == 500


def test_service_unavailable_reason() -> None:
    exc = ServiceUnavailableError("redis", "reset")
    assert exc.message == "redis unavailable"
    assert exc.details == {"dependency": "redis", "reason": "reset"}


@pytest.mark.parametrize(
    ("exc", "status"),
    [
        (TenantNotFoundError("h"), 404),
        (RouteNotFoundError("/x"), 404),
        (ThemeNotFoundError("acme"), 500),
        (InvalidTenantIdError("Acme"), 500),
        (TemplateNotFoundError("index"), 500),
        (TemplateRenderError("index", "boom"), 500),
        (ServiceUnavailableError("redis"), 503),
        (RemoteServiceError("checkout-service", "down"), 502),
        (ValidationException("bad", field="items"), 400),
        (StorageReadError("k", "boom"), 503),
        (StoragePermissionError("k"), 503),
        (StorageNotFoundError("k"), 500),
        (StorefrontException("other"), 500),
    ],
)
def test_status_mapping(exc: StorefrontException, status: int) -> None:
    assert status_for(exc) == status
