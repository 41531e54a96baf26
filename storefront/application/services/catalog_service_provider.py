"""Deprecated catalog provider backed by products-service.

Kept for tenants whose catalog has not moved into their schema yet. Select
it with CATALOG_BACKEND=service. Listing availability wins over correctness
here: any failure (service, timeout, cache) yields an empty listing that is
logged and not cached. products-service has no collections or pages, so
those listings are always empty.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.domain.entities.catalog import Collection, Page, Product, ProductVariant
from storefront.domain.exceptions import StorefrontException
from storefront.infrastructure.cache.cache_aside import CacheAside
from storefront.infrastructure.cache.cache_protocol import CacheProtocol
from storefront.infrastructure.cache.keys import (
    service_product_key,
    service_products_key,
    tenant_catalog_patterns,
)
from storefront.infrastructure.external.platform_services.products import (
    ProductsServiceClient,
)

logger = logging.getLogger(__name__)


def product_from_service(data: dict[str, Any]) -> Product:
    """Map a products-service product (single price, no variants) to Product."""
    price = data.get("price")
    variants = []
    if price is not None:
        variants.append(
            ProductVariant(
                id=str(data["id"]),
                title="Default",
                price=int(price),
                sku=data.get("sku"),
                compare_at_price=(
                    int(data["compare_at_price"])
                    if data.get("compare_at_price") is not None
                    else None
                ),
                inventory_quantity=int(data.get("inventory_qty") or 0),
            )
        )
    return Product(
        id=str(data["id"]),
        title=data.get("title") or "",
        handle=data.get("handle") or "",
        status=data.get("status") or "active",
        description=data.get("description"),
        tags=list(data.get("tags") or []),
        images=list(data.get("images") or []),
        published_at=data.get("created_at"),
        variants=variants,
    )


def _service_options(query: ProductFilter) -> dict[str, Any]:
    """products-service options in the order the cache keys were written with."""
    return {"handle": query.handle, "limit": query.limit, "offset": query.offset}


class ServiceCatalogProvider:
    """Catalog listings from products-service (deprecated)."""

    def __init__(
        self,
        client: ProductsServiceClient,
        cache: CacheProtocol,
        listing_ttl: int,
        product_ttl: int,
    ) -> None:
        logger.warning(
            "ServiceCatalogProvider is deprecated; tenant-schema catalog "
            "(CATALOG_BACKEND=database) is authoritative"
        )
        self.client = client
        self.cache = cache
        self._listings: CacheAside[dict[str, Any]] = CacheAside(
            "service_products",
            [cache],
            key_builder=service_products_key,
            loader=self._fetch_listing,
            ttl=listing_ttl,
        )
        self._product: CacheAside[dict[str, Any]] = CacheAside(
            "service_product",
            [cache],
            key_builder=service_product_key,
            loader=self._fetch_product,
            ttl=product_ttl,
        )

    async def _fetch_listing(self, tenant_id: str, options: dict[str, Any]) -> dict[str, Any]:
        data = await self.client.list_products(
            tenant_id,
            handle=options.get("handle"),
            search=options.get("search"),
            limit=options.get("limit"),
            offset=options.get("offset"),
        )
        logger.info(
            "Products fetched from products-service: tenant=%s count=%s",
            tenant_id,
            len(data.get("products") or []),
        )
        return data

    async def _fetch_product(self, tenant_id: str, handle: str) -> dict[str, Any] | None:
        listing = await self._listings.get(tenant_id, {"handle": handle, "limit": 1})
        products = (listing or {}).get("products") or []
        return products[0] if products else None

    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        if query.collection_id or query.featured:
            logger.debug(
                "products-service ignores collection/featured filters (tenant %s)", tenant_id
            )
        try:
            data = await self._listings.get(tenant_id, _service_options(query))
        except StorefrontException as e:
            logger.error(
                "Error fetching products from products-service for %s: %s", tenant_id, e.details
            )
            return []
        return [product_from_service(p) for p in (data or {}).get("products") or []]

    async def get_product_by_handle(self, tenant_id: str, handle: str) -> Product | None:
        try:
            data = await self._product.get(tenant_id, handle)
        except StorefrontException as e:
            logger.error("Error fetching product %s for %s: %s", handle, tenant_id, e.details)
            return None
        return product_from_service(data) if data else None

    async def list_collections(
        self, tenant_id: str, query: CollectionFilter
    ) -> list[Collection]:
        return []

    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        return []

    async def invalidate_tenant(self, tenant_id: str) -> int:
        removed = 0
        for pattern in tenant_catalog_patterns(tenant_id):
            removed += await self.cache.delete_pattern(pattern)
        logger.info("Catalog cache invalidated for tenant %s (%s keys)", tenant_id, removed)
        return removed
