"""Pytest configuration and fixtures for the storefront renderer.

HTTP tests run the real FastAPI app over httpx ASGITransport with a
Services container built from in-memory fakes: MemoryCache stands in for
Redis, dict-backed repositories for Postgres and object storage, and
httpx.MockTransport for the platform microservices.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.application.services.catalog_provider import DatabaseCatalogProvider
from storefront.application.services.checkout_service import CheckoutService
from storefront.application.services.page_renderer import PageRenderer
from storefront.application.services.route_resolver import RouteResolver
from storefront.application.services.storefront_service import StorefrontService
from storefront.application.services.tenant_resolver import TenantResolver
from storefront.application.services.theme_loader import ThemeLoader
from storefront.core.config import Settings
from storefront.core.container import Services
from storefront.domain.entities.catalog import Collection, Page, Product, ProductVariant
from storefront.domain.entities.tenant import Tenant
from storefront.domain.entities.theme import Theme
from storefront.infrastructure.cache.memory_cache import MemoryCache
from storefront.infrastructure.exceptions import StorageNotFoundError
from storefront.infrastructure.external.cdn.cloudflare import CloudflarePurger
from storefront.infrastructure.external.platform_services import (
    AnalyticsClient,
    CheckoutServiceClient,
    DiscountsServiceClient,
)

SHOP_HOST = "shop.acme.test"
THEME_PREFIX = "themes/acme/v3"

TEMPLATES = {
    "index": (
        "<h1>{{ shop.name }}</h1>"
        "{% for c in collections %}<h2>{{ c.title }}</h2>{% endfor %}"
        "{% for p in featured_products %}<p>{{ p.title }} {{ p.price | money }}</p>{% endfor %}"
    ),
    "product": "<h1>{{ product.title }}</h1><span class=\"price\">{{ product.price | money }}</span>",
    "collection": (
        "<h1>{{ collection.title }}</h1>"
        "{% for p in products %}<a href=\"{{ p.handle | product_url }}\">{{ p.title }}</a>{% endfor %}"
    ),
    "page": "<article><h1>{{ page.title }}</h1>{{ page.content }}</article>",
    "layout": "<html><body>{{ content_for_layout }}</body></html>",
}


def make_tenant(tenant_id: str = "acme", **overrides: Any) -> Tenant:
    data: dict[str, Any] = {
        "id": "1",
        "tenant_id": tenant_id,
        "name": "Acme Store",
        "custom_domain": SHOP_HOST,
    }
    data.update(overrides)
    return Tenant(**data)


def make_product(handle: str, price: int = 999, tags: list[str] | None = None, **overrides: Any) -> Product:
    data: dict[str, Any] = {
        "id": f"p-{handle}",
        "title": handle.replace("-", " ").title(),
        "handle": handle,
        "description": f"All about {handle}",
        "tags": tags or [],
        "images": [f"https://img.test/{handle}.jpg"],
        "variants": [ProductVariant(id=f"v-{handle}", title="Default", price=price)],
    }
    data.update(overrides)
    return Product(**data)


class FakeStorage:
    """Object storage backed by a dict; counts reads."""

    def __init__(self, objects: dict[str, str] | None = None) -> None:
        self.objects = dict(objects or {})
        self.reads: list[str] = []

    async def read_text(self, key: str, encoding: str = "utf-8") -> str:
        self.reads.append(key)
        if key not in self.objects:
            raise StorageNotFoundError(key)
        return self.objects[key]

    async def exists(self, key: str) -> bool:
        return key in self.objects


class FakeTenantRepository:
    def __init__(self, tenants: dict[str, Tenant] | None = None) -> None:
        self.tenants = dict(tenants or {})
        self.calls: list[str] = []

    async def get_active_by_host(self, host: str) -> Tenant | None:
        self.calls.append(host)
        return self.tenants.get(host)


class FakeThemeRepository:
    def __init__(self, themes: dict[str, Theme] | None = None) -> None:
        self.themes = dict(themes or {})
        self.calls: list[str] = []

    async def get_main_theme(self, tenant_id: str) -> Theme | None:
        self.calls.append(tenant_id)
        return self.themes.get(tenant_id)


@dataclass
class FakeCatalogRepository:
    """Tenant catalog in memory; applies the same filters the SQL repository does."""

    products: list[Product] = field(default_factory=list)
    collections: list[Collection] = field(default_factory=list)
    pages: list[Page] = field(default_factory=list)
    memberships: dict[str, list[str]] = field(default_factory=dict)
    calls: list[tuple[str, Any]] = field(default_factory=list)

    @staticmethod
    def _window(items: list[Any], query: Any) -> list[Any]:
        start = query.effective_offset
        return items[start : start + query.effective_limit]

    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        self.calls.append(("products", query))
        items = self.products
        if query.handle is not None:
            items = [p for p in items if p.handle == query.handle]
        if query.collection_id is not None:
            members = self.memberships.get(query.collection_id, [])
            items = [p for p in items if p.id in members]
        if query.featured:
            items = [p for p in items if "featured" in p.tags]
        return self._window(items, query)

    async def list_collections(self, tenant_id: str, query: CollectionFilter) -> list[Collection]:
        self.calls.append(("collections", query))
        items = self.collections
        if query.handle is not None:
            items = [c for c in items if c.handle == query.handle]
        return self._window(items, query)

    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        self.calls.append(("pages", query))
        items = self.pages
        if query.handle is not None:
            items = [p for p in items if p.handle == query.handle]
        return self._window(items, query)


def platform_handler(routes: dict[str, Callable[[httpx.Request], httpx.Response]]) -> Callable:
    """MockTransport handler dispatching on "{METHOD} {path prefix}"; unknown calls 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        for key, respond in routes.items():
            method, prefix = key.split(" ", 1)
            if request.method == method and request.url.path.startswith(prefix):
                return respond(request)
        return httpx.Response(404, json={"error": "not found"})

    return handler


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        rate_limit_enabled=False,
        cloudflare_enabled=False,
        storage_backend="local",
    )


@pytest.fixture
def tenant() -> Tenant:
    return make_tenant()


@pytest.fixture
def theme() -> Theme:
    return Theme(id="t1", name="Dawn", version="3", s3_key=THEME_PREFIX, settings={"accent": "#111"})


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage({f"{THEME_PREFIX}/templates/{name}.liquid": src for name, src in TEMPLATES.items()})


@pytest.fixture
def catalog_repo() -> FakeCatalogRepository:
    summer = Collection(id="c1", title="Summer", handle="summer", product_count=1)
    return FakeCatalogRepository(
        products=[
            make_product("blue-shirt", 2500, tags=["featured"]),
            make_product("red-hat", 999),
        ],
        collections=[summer],
        pages=[
            Page(
                id="pg1",
                title="About",
                handle="about",
                content='[{"id":"h1","type":"hero","position":0,"config":{"title":"About Acme"}},'
                '{"id":"g1","type":"products","position":1,"config":{"limit":2}}]',
            )
        ],
        memberships={"c1": ["p-red-hat"]},
    )


@pytest.fixture
def platform_routes() -> dict[str, Callable[[httpx.Request], httpx.Response]]:
    """Default platform-service responses; tests override entries as needed."""
    return {
        "POST /api/checkout": lambda r: httpx.Response(
            200, json={"checkout_url": "https://pay.test/c/42", "order_id": "42"}
        ),
        "GET /api/discounts/validate/SAVE10": lambda r: httpx.Response(
            200, json={"discount": {"code": "SAVE10", "type": "percentage", "value": 10}}
        ),
        "GET /api/discounts/validate/BIG": lambda r: httpx.Response(
            200,
            json={"discount": {"code": "BIG", "type": "fixed", "value": 500, "minimum_purchase": 10000}},
        ),
        "GET /api/discounts/validate/OLD": lambda r: httpx.Response(410, json={}),
        "POST /api/analytics/track": lambda r: httpx.Response(204),
    }


@pytest.fixture
async def http_client(platform_routes: dict) -> httpx.AsyncClient:
    async with httpx.AsyncClient(transport=httpx.MockTransport(platform_handler(platform_routes))) as client:
        yield client


@pytest.fixture
def services(
    settings: Settings,
    tenant: Tenant,
    theme: Theme,
    storage: FakeStorage,
    catalog_repo: FakeCatalogRepository,
    http_client: httpx.AsyncClient,
) -> Services:
    """Services container wired from fakes (no Postgres, Redis, S3 or network)."""
    redis = MemoryCache()
    memory = MemoryCache()
    database = MagicMock()
    database.ping = AsyncMock(return_value=True)
    redis_client = MagicMock()
    redis_client.ping = AsyncMock(return_value=True)

    cdn = CloudflarePurger(settings, http_client)
    tenants = TenantResolver(FakeTenantRepository({SHOP_HOST: tenant}), redis, settings.cache_ttl_tenant)
    themes = ThemeLoader(
        FakeThemeRepository({tenant.tenant_id: theme}), storage, memory, redis, settings.cache_ttl_themes, purger=cdn
    )
    catalog = DatabaseCatalogProvider(catalog_repo, redis, settings.cache_ttl_data)
    routes = RouteResolver(catalog, currency_symbol=settings.currency_symbol)
    renderer = PageRenderer(settings)
    analytics = AnalyticsClient(http_client, "http://analytics.test", 1.0)
    checkout = CheckoutService(
        CheckoutServiceClient(http_client, "http://checkout.test", 10.0),
        DiscountsServiceClient(http_client, "http://discounts.test", 3.0),
        analytics,
        currency_symbol=settings.currency_symbol,
    )
    return Services(
        settings=settings,
        database=database,
        redis=redis_client,
        memory=memory,
        storage=storage,
        http=http_client,
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


@pytest.fixture
async def client(services: Services) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), Host set to the test shop."""
    from storefront.main import create_app

    app = create_app(services=services)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=f"http://{SHOP_HOST}") as ac:
        yield ac
