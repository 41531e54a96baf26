"""Path -> RouteData resolution.

Routes are tried in a fixed order: home, product, collection, page. Anything
else (including a trailing slash on a non-root path) is a RouteNotFoundError.
"""

from __future__ import annotations

import json
import logging
from dataclasses import replace

from markupsafe import Markup

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.application.dtos.render import RouteData
from storefront.application.interfaces.services import ICatalogProvider
from storefront.application.services.block_renderer import render_blocks
from storefront.core.constants import (
    COLLECTION_PATH_RE,
    HOME_COLLECTIONS_LIMIT,
    HOME_FEATURED_PRODUCTS_LIMIT,
    PAGE_PATH_RE,
    PRODUCT_PATH_RE,
)
from storefront.domain.entities.blocks import ProductsBlock, parse_blocks
from storefront.domain.entities.catalog import Page
from storefront.domain.enums import PageType
from storefront.domain.exceptions import RouteNotFoundError
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)


class RouteResolver:
    """Maps a request path to the template and catalog data it renders."""

    def __init__(self, catalog: ICatalogProvider, currency_symbol: str = "€") -> None:
        self.catalog = catalog
        self.currency_symbol = currency_symbol

    @traced("storefront.resolve_route")
    async def resolve(self, path: str, tenant_id: str) -> RouteData:
        """Resolve path for tenant.

        Raises:
            RouteNotFoundError: No route matches, or the handle has no entity.
        """
        if path in ("", "/"):
            return await self._home(tenant_id)

        match = PRODUCT_PATH_RE.match(path)
        if match:
            return await self._product(tenant_id, path, match.group(1))

        match = COLLECTION_PATH_RE.match(path)
        if match:
            return await self._collection(tenant_id, path, match.group(1))

        match = PAGE_PATH_RE.match(path)
        if match:
            return await self._page(tenant_id, path, match.group(1))

        raise RouteNotFoundError(path)

    async def _home(self, tenant_id: str) -> RouteData:
        collections = await self.catalog.list_collections(
            tenant_id, CollectionFilter(limit=HOME_COLLECTIONS_LIMIT)
        )
        products = await self.catalog.list_products(
            tenant_id, ProductFilter(featured=True, limit=HOME_FEATURED_PRODUCTS_LIMIT)
        )
        return RouteData(
            type=PageType.HOME,
            template="index",
            data={
                "collections": collections,
                "featured_products": products,
                "products": products,
            },
        )

    async def _product(self, tenant_id: str, path: str, handle: str) -> RouteData:
        products = await self.catalog.list_products(
            tenant_id, ProductFilter(handle=handle, limit=1)
        )
        if not products:
            raise RouteNotFoundError(path, "product", handle)
        return RouteData(type=PageType.PRODUCT, template="product", data={"product": products[0]})

    async def _collection(self, tenant_id: str, path: str, handle: str) -> RouteData:
        collections = await self.catalog.list_collections(
            tenant_id, CollectionFilter(handle=handle, limit=1)
        )
        if not collections:
            raise RouteNotFoundError(path, "collection", handle)
        collection = collections[0]
        products = await self.catalog.list_products(
            tenant_id, ProductFilter(collection_id=collection.id)
        )
        return RouteData(
            type=PageType.COLLECTION,
            template="collection",
            data={"collection": collection, "products": products},
        )

    async def _page(self, tenant_id: str, path: str, handle: str) -> RouteData:
        pages = await self.catalog.list_pages(tenant_id, PageFilter(handle=handle, limit=1))
        if not pages:
            raise RouteNotFoundError(path, "page", handle)
        page = await self._render_page_content(tenant_id, pages[0])
        return RouteData(type=PageType.PAGE, template="page", data={"page": page})

    async def _render_page_content(self, tenant_id: str, page: Page) -> Page:
        """Replace the page's JSON block list with its rendered HTML."""
        try:
            raw = json.loads(page.content or "[]")
        except (TypeError, ValueError):
            logger.warning("Page %s has malformed block content; rendering empty", page.handle)
            raw = []
        blocks = parse_blocks(raw)
        grid_limits = [b.config.limit for b in blocks if isinstance(b, ProductsBlock)]
        products = []
        if grid_limits:
            products = await self.catalog.list_products(
                tenant_id, ProductFilter(limit=max(grid_limits))
            )
        html = render_blocks(blocks, products=products, currency_symbol=self.currency_symbol)
        return replace(page, content=Markup(html))
