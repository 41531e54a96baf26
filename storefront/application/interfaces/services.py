"""Service interfaces used across the render pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.application.dtos.catalog import (
        CollectionFilter,
        PageFilter,
        ProductFilter,
    )
    from storefront.domain.entities.catalog import Collection, Page, Product


class ICatalogProvider(Protocol):
    """Cached catalog listings for one tenant at a time.

    Implementations: DatabaseCatalogProvider (canonical) and
    ServiceCatalogProvider (deprecated, products-service backed).
    """

    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        ...

    async def list_collections(
        self, tenant_id: str, query: CollectionFilter
    ) -> list[Collection]:
        ...

    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        ...

    async def invalidate_tenant(self, tenant_id: str) -> int:
        """Drop every cached listing of the tenant; return keys removed."""
        ...


class ICdnPurger(Protocol):
    async def purge_tenant(self, tenant_id: str) -> bool:
        """Best-effort edge purge; never raises."""
        ...
