"""Canonical catalog provider: tenant schema reads cached in Redis.

Cache keys embed the tenant id and the full filter, so distinct filter
shapes never collide and invalidate_tenant can purge them all by pattern.
"""

from __future__ import annotations

import logging

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.application.interfaces.repositories import ICatalogRepository
from storefront.domain.entities.catalog import Collection, Page, Product
from storefront.infrastructure.cache.cache_aside import CacheAside
from storefront.infrastructure.cache.cache_protocol import CacheProtocol
from storefront.infrastructure.cache.keys import (
    collections_key,
    pages_key,
    products_key,
    tenant_catalog_patterns,
)
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)


def _encode_list(items: list) -> list[dict]:
    return [i.to_dict() for i in items]


class DatabaseCatalogProvider:
    """Product, collection and page listings for a tenant.

    Database and cache failures propagate as ServiceUnavailableError.
    """

    def __init__(self, repository: ICatalogRepository, cache: CacheProtocol, ttl: int) -> None:
        self.cache = cache
        self._products: CacheAside[list[Product]] = CacheAside(
            "products",
            [cache],
            key_builder=products_key,
            loader=repository.list_products,
            ttl=ttl,
            encode=_encode_list,
            decode=lambda rows: [Product.from_dict(r) for r in rows],
        )
        self._collections: CacheAside[list[Collection]] = CacheAside(
            "collections",
            [cache],
            key_builder=collections_key,
            loader=repository.list_collections,
            ttl=ttl,
            encode=_encode_list,
            decode=lambda rows: [Collection.from_dict(r) for r in rows],
        )
        self._pages: CacheAside[list[Page]] = CacheAside(
            "pages",
            [cache],
            key_builder=pages_key,
            loader=repository.list_pages,
            ttl=ttl,
            encode=_encode_list,
            decode=lambda rows: [Page.from_dict(r) for r in rows],
        )

    @traced("storefront.list_products")
    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        return await self._products.get(tenant_id, query) or []

    @traced("storefront.list_collections")
    async def list_collections(
        self, tenant_id: str, query: CollectionFilter
    ) -> list[Collection]:
        return await self._collections.get(tenant_id, query) or []

    @traced("storefront.list_pages")
    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        return await self._pages.get(tenant_id, query) or []

    async def invalidate_tenant(self, tenant_id: str) -> int:
        """SCAN-delete every catalog key of the tenant, whatever its filter shape."""
        removed = 0
        for pattern in tenant_catalog_patterns(tenant_id):
            removed += await self.cache.delete_pattern(pattern)
        logger.info("Catalog cache invalidated for tenant %s (%s keys)", tenant_id, removed)
        return removed
