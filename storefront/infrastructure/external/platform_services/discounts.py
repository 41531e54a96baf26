"""discounts-service client."""

from typing import Any
from urllib.parse import quote

from storefront.infrastructure.external.platform_services.base import ServiceClient


class DiscountsServiceClient(ServiceClient):
    service_name = "discounts-service"

    async def validate(self, tenant_id: str, code: str) -> dict[str, Any]:
        """GET /api/discounts/validate/{code}.

        Returns the "discount" object of the response. A 404 (unknown code)
        or 410 (expired / usage limit) surfaces as RemoteServiceError with
        that status_code; the caller decides what it means.
        """
        data = await self._json(
            "GET",
            f"/api/discounts/validate/{quote(code, safe='')}",
            params={"tenant_id": tenant_id},
        )
        discount = data.get("discount")
        return discount if isinstance(discount, dict) else {}
