"""products-service client (backs the deprecated service catalog)."""

from typing import Any

from storefront.core.constants import DEFAULT_LISTING_LIMIT, DEFAULT_LISTING_OFFSET
from storefront.infrastructure.external.platform_services.base import ServiceClient


class ProductsServiceClient(ServiceClient):
    service_name = "products-service"

    async def list_products(
        self,
        tenant_id: str,
        *,
        handle: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> dict[str, Any]:
        """GET /api/products for active products of a tenant.

        Returns:
            {"products": [...], "total": n} as sent by the service.
        """
        params: dict[str, Any] = {
            "tenant_id": tenant_id,
            "status": "active",
            "limit": limit or DEFAULT_LISTING_LIMIT,
            "offset": offset or DEFAULT_LISTING_OFFSET,
        }
        if handle:
            params["handle"] = handle
        if search:
            params["search"] = search
        return await self._json("GET", "/api/products", params=params)
