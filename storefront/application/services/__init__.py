"""Application services: the render pipeline stages and checkout."""

from storefront.application.services.block_renderer import render_block, render_blocks
from storefront.application.services.catalog_provider import DatabaseCatalogProvider
from storefront.application.services.catalog_service_provider import ServiceCatalogProvider
from storefront.application.services.checkout_service import (
    CheckoutService,
    calculate_discount,
)
from storefront.application.services.page_renderer import PageRenderer
from storefront.application.services.route_resolver import RouteResolver
from storefront.application.services.storefront_service import StorefrontService
from storefront.application.services.tenant_resolver import TenantResolver, normalize_host
from storefront.application.services.theme_loader import ThemeLoader

__all__ = [
    "CheckoutService",
    "DatabaseCatalogProvider",
    "PageRenderer",
    "RouteResolver",
    "ServiceCatalogProvider",
    "StorefrontService",
    "TenantResolver",
    "ThemeLoader",
    "calculate_discount",
    "normalize_host",
    "render_block",
    "render_blocks",
]
