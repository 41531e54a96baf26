"""ORM models for the platform registry and the per-tenant schemas."""

from storefront.infrastructure.persistence.models.catalog import (
    CollectionModel,
    CollectionProductModel,
    PageModel,
    ProductModel,
    ProductVariantModel,
)
from storefront.infrastructure.persistence.models.platform import (
    DomainMappingModel,
    TenantModel,
)
from storefront.infrastructure.persistence.models.theme import ThemeModel

__all__ = [
    "CollectionModel",
    "CollectionProductModel",
    "DomainMappingModel",
    "PageModel",
    "ProductModel",
    "ProductVariantModel",
    "TenantModel",
    "ThemeModel",
]
