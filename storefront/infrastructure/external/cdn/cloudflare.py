"""Cloudflare cache purge by tag.

Rendered pages carry Surrogate-Key "tenant_{id} page_{type}"; purging the
tenant tag drops every cached page of that tenant at the edge. Purging is
best effort: a failure is logged and counted, never raised, so a CDN outage
cannot break theme publishing or page delivery.
"""

from __future__ import annotations

import logging

import httpx

from storefront.core.config import Settings
from storefront.core.metrics import CDN_PURGES

logger = logging.getLogger(__name__)


def tenant_tag(tenant_id: str) -> str:
    return f"tenant_{tenant_id}"


class CloudflarePurger:
    """Posts purge requests to the zone's purge_cache endpoint."""

    def __init__(self, settings: Settings, http: httpx.AsyncClient) -> None:
        self.enabled = settings.cloudflare_enabled
        self.zone_id = settings.cloudflare_zone_id
        self.api_token = (
            settings.cloudflare_api_token.get_secret_value()
            if settings.cloudflare_api_token
            else None
        )
        self.api_base_url = settings.cloudflare_api_base_url.rstrip("/")
        self.timeout = settings.cloudflare_timeout_seconds
        self._http = http

    async def purge_tenant(self, tenant_id: str) -> bool:
        """Purge every edge-cached page of a tenant. Returns True on success."""
        if not self.enabled:
            logger.debug("Cloudflare CDN purge skipped (not enabled)")
            return False
        url = f"{self.api_base_url}/zones/{self.zone_id}/purge_cache"
        try:
            resp = await self._http.post(
                url,
                json={"tags": [tenant_tag(tenant_id)]},
                headers={"Authorization": f"Bearer {self.api_token}"},
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPError as e:
            CDN_PURGES.labels(outcome="error").inc()
            logger.error("Error purging CDN cache for tenant %s: %s", tenant_id, e)
            return False
        CDN_PURGES.labels(outcome="ok").inc()
        logger.info("CDN cache purged for tenant %s", tenant_id)
        return True
