"""Storefront render pipeline: host + path -> HTML.

tenant resolver -> theme loader -> route resolver (-> catalog) -> page renderer.
"""

from __future__ import annotations

import logging
import time

from storefront.application.dtos.render import RenderContext, RenderResult
from storefront.application.services.page_renderer import PageRenderer
from storefront.application.services.route_resolver import RouteResolver
from storefront.application.services.tenant_resolver import TenantResolver
from storefront.application.services.theme_loader import ThemeLoader
from storefront.core.metrics import record_render
from storefront.domain.exceptions import (
    RouteNotFoundError,
    StorefrontException,
    TenantNotFoundError,
    ThemeNotFoundError,
)
from storefront.shared.telemetry import add_span_attributes, traced

logger = logging.getLogger(__name__)

_OUTCOMES: dict[type[StorefrontException], str] = {
    TenantNotFoundError: "tenant_not_found",
    ThemeNotFoundError: "theme_not_found",
    RouteNotFoundError: "route_not_found",
}


class StorefrontService:
    """Orchestrates one storefront page render."""

    def __init__(
        self,
        tenants: TenantResolver,
        themes: ThemeLoader,
        routes: RouteResolver,
        renderer: PageRenderer,
    ) -> None:
        self.tenants = tenants
        self.themes = themes
        self.routes = routes
        self.renderer = renderer

    @traced("storefront.render")
    async def render(
        self, host: str, path: str, query: dict[str, str] | None = None
    ) -> RenderResult:
        """Render the page at path for the tenant that owns host.

        Raises:
            TenantNotFoundError: No active tenant for host.
            ThemeNotFoundError: Tenant has no main theme.
            RouteNotFoundError: Path or handle resolves to nothing.
            TemplateNotFoundError / TemplateRenderError: Theme cannot render the page.
            ServiceUnavailableError: Cache, database or storage failure.
        """
        started = time.perf_counter()
        try:
            tenant = await self.tenants.resolve(host)
            if tenant is None:
                raise TenantNotFoundError(host)
            add_span_attributes(tenant_id=tenant.tenant_id)

            theme = await self.themes.load(tenant.tenant_id)
            if theme is None:
                raise ThemeNotFoundError(tenant.tenant_id)

            route_data = await self.routes.resolve(path, tenant.tenant_id)
            context = RenderContext(tenant=tenant, path=path, query=dict(query or {}))
            html = self.renderer.render(theme, route_data, context)
        except StorefrontException as e:
            record_render("none", _OUTCOMES.get(type(e), "error"))
            raise
        except Exception:
            record_render("none", "error")
            raise

        elapsed = time.perf_counter() - started
        page_type = route_data.type
        record_render(page_type.value, "ok", elapsed)
        render_ms = int(elapsed * 1000)
        logger.info(
            "Page rendered: tenant=%s path=%s type=%s theme=%s %dms",
            tenant.tenant_id,
            path,
            page_type.value,
            theme.version,
            render_ms,
        )
        return RenderResult(
            html=html,
            tenant_id=tenant.tenant_id,
            theme_version=theme.version,
            page_type=page_type,
            render_ms=render_ms,
        )
