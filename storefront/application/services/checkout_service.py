"""Cart checkout and discount validation against the platform microservices.

Amounts are integer minor units throughout. The discounts service returns
discount objects shaped like::

    {"code": "SUMMER10", "type": "percentage", "value": 10, "minimum_purchase": 5000}
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from storefront.application.dtos.checkout import (
    CheckoutRequest,
    CheckoutResult,
    DiscountValidation,
)
from storefront.application.services.template_filters import format_money
from storefront.domain.entities.tenant import Tenant
from storefront.domain.enums import DiscountType
from storefront.domain.exceptions import RemoteServiceError, ValidationException
from storefront.infrastructure.external.platform_services import (
    AnalyticsClient,
    CheckoutServiceClient,
    DiscountsServiceClient,
)
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)

INVALID_CODE_MESSAGE = "Invalid discount code"
EXPIRED_CODE_MESSAGE = "Discount code expired or limit reached"

_DISCOUNT_STATUS_MESSAGES: dict[int, str] = {
    404: INVALID_CODE_MESSAGE,
    410: EXPIRED_CODE_MESSAGE,
}


def _amount(value: Any) -> Decimal | None:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def calculate_discount(discount: dict[str, Any], subtotal: int) -> int:
    """Discount amount in minor units.

    percentage: subtotal * value / 100, rounded half-up to a whole minor unit.
    fixed: value, capped at the subtotal. Any other type: 0.
    """
    value = _amount(discount.get("value"))
    if value is None or value <= 0 or subtotal <= 0:
        return 0
    kind = discount.get("type")
    if kind == DiscountType.PERCENTAGE.value:
        amount = (Decimal(subtotal) * value / 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        return min(int(amount), subtotal)
    if kind == DiscountType.FIXED.value:
        return min(int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP)), subtotal)
    return 0


class CheckoutService:
    """Creates checkouts and validates discount codes for a tenant's cart."""

    def __init__(
        self,
        checkout_client: CheckoutServiceClient,
        discounts_client: DiscountsServiceClient,
        analytics: AnalyticsClient,
        currency_symbol: str = "€",
    ) -> None:
        self.checkout_client = checkout_client
        self.discounts_client = discounts_client
        self.analytics = analytics
        self.currency_symbol = currency_symbol

    @traced("storefront.validate_discount")
    async def validate_discount(
        self, tenant: Tenant, code: str, subtotal: int
    ) -> DiscountValidation:
        """Look up code with discounts-service and enforce its minimum purchase.

        Unknown (404) and exhausted (410) codes come back as invalid results.

        Raises:
            RemoteServiceError: discounts-service failed for any other reason.
        """
        try:
            discount = await self.discounts_client.validate(tenant.tenant_id, code)
        except RemoteServiceError as e:
            message = _DISCOUNT_STATUS_MESSAGES.get(e.details.get("status_code"))
            if message is None:
                logger.error(
                    "Error validating discount for tenant %s: %s", tenant.tenant_id, e.details
                )
                raise
            return DiscountValidation(valid=False, error=message)

        minimum = _amount(discount.get("minimum_purchase"))
        if minimum and subtotal < minimum:
            return DiscountValidation(
                valid=False,
                discount=discount,
                error=f"Minimum purchase of {format_money(minimum, self.currency_symbol)} required",
            )
        logger.info(
            "Discount code validated for tenant %s: type=%s value=%s",
            tenant.tenant_id,
            discount.get("type"),
            discount.get("value"),
        )
        return DiscountValidation(valid=True, discount=discount)

    @traced("storefront.checkout")
    async def checkout(self, tenant: Tenant, request: CheckoutRequest) -> CheckoutResult:
        """Validate the discount (if any), then create the checkout session.

        Raises:
            ValidationException: Empty cart or a discount code that does not apply.
            RemoteServiceError: checkout-service or discounts-service failed.
        """
        if not request.items:
            raise ValidationException("Cart is empty", field="items")

        subtotal = request.subtotal
        discount: dict[str, Any] = {}
        discount_amount = 0
        if request.discount_code:
            validation = await self.validate_discount(tenant, request.discount_code, subtotal)
            if not validation.valid:
                raise ValidationException(
                    validation.error or INVALID_CODE_MESSAGE, field="discount_code"
                )
            discount = validation.discount
            discount_amount = calculate_discount(discount, subtotal)

        payload = {
            "tenant_id": tenant.tenant_id,
            "items": [item.to_dict() for item in request.items],
            "customer_email": request.customer_email,
            "shipping_address": request.shipping_address,
            "billing_address": request.billing_address or request.shipping_address,
            "discount_code": (
                discount.get("code", request.discount_code) if request.discount_code else None
            ),
        }
        data = await self.checkout_client.create_checkout(payload)
        checkout_url = data.get("checkout_url")
        order_id = data.get("order_id")
        if not checkout_url or order_id is None:
            raise RemoteServiceError(
                self.checkout_client.service_name, "response missing checkout_url or order_id"
            )

        total = subtotal - discount_amount
        logger.info(
            "Checkout created for tenant %s: order=%s total=%s",
            tenant.tenant_id,
            order_id,
            total,
        )
        return CheckoutResult(
            checkout_url=str(checkout_url),
            order_id=str(order_id),
            subtotal=subtotal,
            discount=discount_amount,
            total=total,
        )

    async def track_checkout(self, tenant: Tenant, result: CheckoutResult) -> None:
        """Record a checkout_created analytics event (never raises)."""
        await self.analytics.track(
            tenant.tenant_id,
            "checkout_created",
            {"order_id": result.order_id, "total": result.total},
        )
