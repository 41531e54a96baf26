"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill.
All types reference domain entities or application DTOs only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.application.dtos.catalog import (
        CollectionFilter,
        PageFilter,
        ProductFilter,
    )
    from storefront.domain.entities.catalog import Collection, Page, Product
    from storefront.domain.entities.tenant import Tenant
    from storefront.domain.entities.theme import Theme


class ITenantRepository(Protocol):
    async def get_active_by_host(self, host: str) -> Tenant | None:
        """Active tenant with a verified domain mapping for host, or None."""


class IThemeRepository(Protocol):
    async def get_main_theme(self, tenant_id: str) -> Theme | None:
        """Main theme metadata for tenant (templates not loaded), or None."""


class ICatalogRepository(Protocol):
    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        """Active products, newest first."""

    async def list_collections(
        self, tenant_id: str, query: CollectionFilter
    ) -> list[Collection]:
        """Published collections, newest first."""

    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        """Published pages, newest first."""
