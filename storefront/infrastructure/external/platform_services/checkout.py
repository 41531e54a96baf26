"""checkout-service client."""

from typing import Any

from storefront.infrastructure.external.platform_services.base import ServiceClient


class CheckoutServiceClient(ServiceClient):
    service_name = "checkout-service"

    async def create_checkout(self, payload: dict[str, Any]) -> dict[str, Any]:
        """POST /api/checkout; returns {"checkout_url": ..., "order_id": ...}."""
        return await self._json("POST", "/api/checkout", json=payload)
