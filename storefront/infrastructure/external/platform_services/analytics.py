"""analytics-service client. Tracking never fails the caller."""

import logging
from typing import Any

from storefront.domain.exceptions import RemoteServiceError
from storefront.infrastructure.external.platform_services.base import ServiceClient

logger = logging.getLogger(__name__)


class AnalyticsClient(ServiceClient):
    service_name = "analytics-service"

    async def track(self, tenant_id: str, event: str, data: dict[str, Any]) -> None:
        """POST /api/analytics/track. Errors are logged at debug level and dropped."""
        try:
            await self._request(
                "POST",
                "/api/analytics/track",
                json={"tenant_id": tenant_id, "event": event, "data": data},
            )
        except RemoteServiceError as e:
            logger.debug("Analytics event %s dropped for %s: %s", event, tenant_id, e.details)
