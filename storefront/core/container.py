"""Process-wide service container.

build_services() wires every client and pipeline stage once (in the lifespan
or an operator script); endpoints receive the container through
dependencies instead of reaching for module-level globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from storefront.application.interfaces.services import ICatalogProvider
from storefront.application.services.catalog_provider import DatabaseCatalogProvider
from storefront.application.services.catalog_service_provider import ServiceCatalogProvider
from storefront.application.services.checkout_service import CheckoutService
from storefront.application.services.page_renderer import PageRenderer
from storefront.application.services.route_resolver import RouteResolver
from storefront.application.services.storefront_service import StorefrontService
from storefront.application.services.tenant_resolver import TenantResolver
from storefront.application.services.theme_loader import ThemeLoader
from storefront.core.config import Settings
from storefront.infrastructure.cache import CacheService, MemoryCache
from storefront.infrastructure.external.cdn import CloudflarePurger
from storefront.infrastructure.external.platform_services import (
    AnalyticsClient,
    CheckoutServiceClient,
    DiscountsServiceClient,
    ProductsServiceClient,
)
from storefront.infrastructure.external.storage import StorageFactory, StorageProtocol
from storefront.infrastructure.persistence import Database
from storefront.infrastructure.persistence.repositories import (
    CatalogRepository,
    TenantRepository,
    ThemeRepository,
)

logger = logging.getLogger(__name__)

# Connection pool limits for the shared outbound client.
_HTTP_LIMITS = httpx.Limits(max_connections=100, max_keepalive_connections=20)
_HTTP_DEFAULT_TIMEOUT = 10.0


@dataclass
class Services:
    """Everything a request or operator script needs, built once per process."""

    settings: Settings
    database: Database
    redis: CacheService
    memory: MemoryCache
    storage: StorageProtocol
    http: httpx.AsyncClient
    tenants: TenantResolver
    themes: ThemeLoader
    catalog: ICatalogProvider
    routes: RouteResolver
    renderer: PageRenderer
    storefront: StorefrontService
    checkout: CheckoutService
    analytics: AnalyticsClient
    cdn: CloudflarePurger

    async def close(self) -> None:
        """Release every connection. Safe to call once at shutdown."""
        await self.http.aclose()
        await self.redis.disconnect()
        await self.database.dispose()
        self.memory.clear()
        logger.info("Services closed")


def _build_catalog(
    settings: Settings, database: Database, redis: CacheService, http: httpx.AsyncClient
) -> ICatalogProvider:
    if settings.catalog_backend == "service":
        client = ProductsServiceClient(
            http, settings.products_service_url, settings.products_service_timeout_seconds
        )
        return ServiceCatalogProvider(
            client,
            redis,
            listing_ttl=settings.cache_ttl_service_products,
            product_ttl=settings.cache_ttl_service_product,
        )
    return DatabaseCatalogProvider(CatalogRepository(database), redis, settings.cache_ttl_data)


async def build_services(
    settings: Settings,
    *,
    database: Database | None = None,
    redis: CacheService | None = None,
    storage: StorageProtocol | None = None,
    http: httpx.AsyncClient | None = None,
) -> Services:
    """Create and connect every client, then wire the pipeline.

    Any of the infrastructure handles may be passed in (tests, scripts);
    the rest are built from settings.
    """
    database = database or Database(settings)
    if redis is None:
        redis = CacheService(settings)
        await redis.connect()
    storage = storage or StorageFactory.create_storage_service(settings)
    http = http or httpx.AsyncClient(timeout=_HTTP_DEFAULT_TIMEOUT, limits=_HTTP_LIMITS)
    memory = MemoryCache(
        max_entries=settings.memory_cache_max_entries,
        enabled=settings.memory_cache_enabled,
    )

    cdn = CloudflarePurger(settings, http)
    tenants = TenantResolver(TenantRepository(database), redis, settings.cache_ttl_tenant)
    themes = ThemeLoader(
        ThemeRepository(database),
        storage,
        memory,
        redis,
        settings.cache_ttl_themes,
        purger=cdn,
        template_extension=settings.theme_template_extension,
    )
    catalog = _build_catalog(settings, database, redis, http)
    routes = RouteResolver(catalog, currency_symbol=settings.currency_symbol)
    renderer = PageRenderer(settings)
    analytics = AnalyticsClient(
        http, settings.analytics_service_url, settings.analytics_service_timeout_seconds
    )
    checkout = CheckoutService(
        CheckoutServiceClient(
            http, settings.checkout_service_url, settings.checkout_service_timeout_seconds
        ),
        DiscountsServiceClient(
            http, settings.discounts_service_url, settings.discounts_service_timeout_seconds
        ),
        analytics,
        currency_symbol=settings.currency_symbol,
    )

    logger.info(
        "Services built: storage=%s catalog=%s redis=%s cdn_purge=%s",
        settings.storage_backend,
        settings.catalog_backend,
        redis.is_available(),
        cdn.enabled,
    )
    return Services(
        settings=settings,
        database=database,
        redis=redis,
        memory=memory,
        storage=storage,
        http=http,
        tenants=tenants,
        themes=themes,
        catalog=catalog,
        routes=routes,
        renderer=renderer,
        storefront=StorefrontService(tenants, themes, routes, renderer),
        checkout=checkout,
        analytics=analytics,
        cdn=cdn,
    )
