"""Read-only repositories over the platform registry and tenant schemas."""

from storefront.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from storefront.infrastructure.persistence.repositories.tenant_repo import TenantRepository
from storefront.infrastructure.persistence.repositories.theme_repo import ThemeRepository

__all__ = ["CatalogRepository", "TenantRepository", "ThemeRepository"]
