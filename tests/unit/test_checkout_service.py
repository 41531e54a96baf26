"""Tests for discount calculation, discount validation and checkout creation."""

import json

import httpx
import pytest

from storefront.application.dtos.checkout import CartItem, CheckoutRequest
from storefront.application.services.checkout_service import (
    EXPIRED_CODE_MESSAGE,
    INVALID_CODE_MESSAGE,
    CheckoutService,
    calculate_discount,
)
from storefront.domain.entities.tenant import Tenant
from storefront.domain.exceptions import RemoteServiceError, ValidationException
from storefront.infrastructure.external.platform_services import (
    AnalyticsClient,
    CheckoutServiceClient,
    DiscountsServiceClient,
)
from tests.conftest import platform_handler


@pytest.mark.parametrize(
    ("discount", "subtotal", "expected"),
    [
        ({"type": "percentage", "value": 10}, 5999, 600),
        ({"type": "percentage", "value": 15}, 1001, 150),
        ({"type": "percentage", "value": 12.5}, 100, 13),
        ({"type": "percentage", "value": "20"}, 1000, 200),
        ({"type": "percentage", "value": 150}, 1000, 1000),
        ({"type": "fixed", "value": 500}, 5000, 500),
        ({"type": "fixed", "value": 500}, 300, 300),
        ({"type": "free_shipping", "value": 500}, 5000, 0),
        ({"type": "percentage"}, 5000, 0),
        ({"type": "percentage", "value": -5}, 5000, 0),
        ({"type": "fixed", "value": "abc"}, 5000, 0),
    ],
)
def test_calculate_discount(discount, subtotal, expected) -> None:
    assert calculate_discount(discount, subtotal) == expected


def _request(**overrides) -> CheckoutRequest:
    data = {
        "items": [CartItem(product_id="p1", quantity=2, price=1500), CartItem(product_id="p2", quantity=1, price=1000)],
        "customer_email": "jane@example.com",
        "shipping_address": {"line1": "1 Main St", "city": "Dublin", "postal_code": "D01", "country": "IE"},
    }
    data.update(overrides)
    return CheckoutRequest(**data)


def test_subtotal_and_line_totals() -> None:
    request = _request()
    assert request.items[0].line_total == 3000
    assert request.subtotal == 4000
    assert request.items[0].to_dict() == {"product_id": "p1", "quantity": 2, "price": 1500}


@pytest.fixture
def service(platform_routes: dict) -> CheckoutService:
    http = httpx.AsyncClient(transport=httpx.MockTransport(platform_handler(platform_routes)))
    return CheckoutService(
        CheckoutServiceClient(http, "http://checkout.test", 10.0),
        DiscountsServiceClient(http, "http://discounts.test", 3.0),
        AnalyticsClient(http, "http://analytics.test", 1.0),
    )


async def test_validate_known_code(service: CheckoutService, tenant: Tenant) -> None:
    result = await service.validate_discount(tenant, "SAVE10", 2000)
    assert result.valid is True
    assert result.discount["type"] == "percentage"
    assert result.error is None


@pytest.mark.parametrize(("code", "message"), [("NOPE", INVALID_CODE_MESSAGE), ("OLD", EXPIRED_CODE_MESSAGE)])
async def test_validate_rejected_codes(service: CheckoutService, tenant: Tenant, code: str, message: str) -> None:
    result = await service.validate_discount(tenant, code, 2000)
    assert result.valid is False
    assert result.error == message


async def test_validate_minimum_purchase(service: CheckoutService, tenant: Tenant) -> None:
    result = await service.validate_discount(tenant, "BIG", 9999)
    assert result.valid is False
    assert result.error == "Minimum purchase of €100.00 required"
    assert (await service.validate_discount(tenant, "BIG", 10000)).valid is True


async def test_validate_service_failure_raises(
    service: CheckoutService, tenant: Tenant, platform_routes: dict
) -> None:
    platform_routes["GET /api/discounts/validate/"] = lambda r: httpx.Response(500)
    with pytest.raises(RemoteServiceError) as exc_info:
        await service.validate_discount(tenant, "ANY", 2000)
    assert exc_info.value.details["status_code"] == 500


async def test_checkout_without_discount(service: CheckoutService, tenant: Tenant) -> None:
    result = await service.checkout(tenant, _request())
    assert result.order_id == "42"
    assert result.checkout_url == "https://pay.test/c/42"
    assert (result.subtotal, result.discount, result.total) == (4000, 0, 4000)


async def test_checkout_with_fixed_discount(service: CheckoutService, tenant: Tenant) -> None:
    request = _request(items=[CartItem(product_id="p1", quantity=1, price=12000)], discount_code="BIG")
    result = await service.checkout(tenant, request)
    assert (result.subtotal, result.discount, result.total) == (12000, 500, 11500)


async def test_checkout_payload(service: CheckoutService, tenant: Tenant, platform_routes: dict) -> None:
    sent: list[dict] = []

    def capture(request: httpx.Request) -> httpx.Response:
        sent.append(json.loads(request.content))
        return httpx.Response(200, json={"checkout_url": "https://pay.test/c/1", "order_id": 1})

    platform_routes["POST /api/checkout"] = capture
    billing = {"line1": "2 Side St", "city": "Cork", "postal_code": "T12", "country": "IE"}
    result = await service.checkout(tenant, _request(billing_address=billing, discount_code="SAVE10"))
    payload = sent[0]
    assert payload["tenant_id"] == "acme"
    assert payload["billing_address"] == billing
    assert payload["discount_code"] == "SAVE10"
    assert payload["items"][1] == {"product_id": "p2", "quantity": 1, "price": 1000}
    assert result.order_id == "1"


async def test_checkout_empty_cart(service: CheckoutService, tenant: Tenant) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.checkout(tenant, _request(items=[]))
    assert exc_info.value.details == {"field": "items"}


async def test_checkout_invalid_code(service: CheckoutService, tenant: Tenant) -> None:
    with pytest.raises(ValidationException) as exc_info:
        await service.checkout(tenant, _request(discount_code="NOPE"))
    assert exc_info.value.message == INVALID_CODE_MESSAGE
    assert exc_info.value.details == {"field": "discount_code"}


async def test_checkout_incomplete_response(
    service: CheckoutService, tenant: Tenant, platform_routes: dict
) -> None:
    platform_routes["POST /api/checkout"] = lambda r: httpx.Response(200, json={"order_id": "1"})
    with pytest.raises(RemoteServiceError):
        await service.checkout(tenant, _request())


async def test_track_checkout_never_raises(
    service: CheckoutService, tenant: Tenant, platform_routes: dict
) -> None:
    platform_routes["POST /api/analytics/track"] = lambda r: httpx.Response(500)
    result = await service.checkout(tenant, _request())
    await service.track_checkout(tenant, result)
