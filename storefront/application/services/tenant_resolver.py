"""Host -> tenant resolution (cache-aside over the platform registry)."""

from __future__ import annotations

import logging

from storefront.application.interfaces.repositories import ITenantRepository
from storefront.domain.entities.tenant import Tenant
from storefront.infrastructure.cache.cache_aside import CacheAside
from storefront.infrastructure.cache.cache_protocol import CacheProtocol
from storefront.infrastructure.cache.keys import tenant_host_key
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)


def normalize_host(host: str | None) -> str:
    """Lower-case, strip the port and any trailing dot: "Shop.Example.com:8080" -> "shop.example.com"."""
    if not host:
        return ""
    host = host.strip().lower()
    if host.startswith("["):
        # IPv6 literal, e.g. [::1]:8000
        end = host.find("]")
        host = host[: end + 1] if end != -1 else host
    elif ":" in host:
        host = host.rsplit(":", 1)[0]
    return host.rstrip(".")


class TenantResolver:
    """Resolves an inbound Host header to an active tenant.

    A host with no active, verified mapping resolves to None and is not
    cached, so a newly verified domain starts serving without invalidation.
    Cache and registry failures propagate (ServiceUnavailableError).
    """

    def __init__(self, repository: ITenantRepository, cache: CacheProtocol, ttl: int) -> None:
        self._cache = CacheAside(
            "tenant",
            [cache],
            key_builder=tenant_host_key,
            loader=repository.get_active_by_host,
            ttl=ttl,
            encode=Tenant.to_dict,
            decode=Tenant.from_dict,
        )

    @traced("storefront.resolve_tenant")
    async def resolve(self, host: str) -> Tenant | None:
        normalized = normalize_host(host)
        if not normalized:
            return None
        tenant = await self._cache.get(normalized)
        if tenant is None:
            logger.warning("Tenant not found for host %s", normalized)
        return tenant

    async def invalidate(self, host: str) -> None:
        """Drop the cached mapping; call after any domain-mapping change."""
        await self._cache.invalidate(normalize_host(host))
