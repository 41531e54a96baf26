"""Domain layer: entities, enums and exceptions.

No dependencies on infrastructure or presentation.
"""

from storefront.domain.entities import Collection, Page, Product, Tenant, Theme
from storefront.domain.enums import BlockType, PageType, TenantStatus
from storefront.domain.exceptions import (
    NotFoundException,
    RemoteServiceError,
    RouteNotFoundError,
    ServiceUnavailableError,
    StorefrontException,
    TemplateNotFoundError,
    TemplateRenderError,
    TenantNotFoundError,
    ThemeNotFoundError,
    ValidationException,
)

__all__ = [
    # Entities
    "Collection",
    "Page",
    "Product",
    "Tenant",
    "Theme",
    # Enums
    "BlockType",
    "PageType",
    "TenantStatus",
    # Exceptions
    "NotFoundException",
    "RemoteServiceError",
    "RouteNotFoundError",
    "ServiceUnavailableError",
    "StorefrontException",
    "TemplateNotFoundError",
    "TemplateRenderError",
    "TenantNotFoundError",
    "ThemeNotFoundError",
    "ValidationException",
]
