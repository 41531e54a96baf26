"""Theme template rendering (Jinja2, sandboxed).

Templates are merchant-authored, so they run in a SandboxedEnvironment.
Rendering is two-pass when the theme has a layout: the page template first,
then the layout with the page HTML bound as content_for_layout.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from jinja2 import TemplateError
from jinja2.sandbox import SandboxedEnvironment
from markupsafe import Markup

from storefront.application.dtos.render import RenderContext, RouteData
from storefront.application.services.template_filters import build_filters
from storefront.core.config import Settings
from storefront.core.constants import LAYOUT_TEMPLATE
from storefront.domain.entities.theme import Theme
from storefront.domain.exceptions import TemplateNotFoundError, TemplateRenderError
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)

_COMPILED_TEMPLATE_CACHE_SIZE = 512


class PageRenderer:
    """Renders RouteData through a theme's templates.

    Compiled templates are cached by source text, so a new theme version
    compiles once per process.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.env = SandboxedEnvironment(autoescape=True)
        # Custom filters replace Jinja built-ins of the same name (truncate).
        self.env.filters.update(build_filters(settings))
        self._compile = lru_cache(maxsize=_COMPILED_TEMPLATE_CACHE_SIZE)(self.env.from_string)

    def build_scope(
        self, theme: Theme, route_data: RouteData, context: RenderContext
    ) -> dict[str, Any]:
        """Template variables: route data plus shop, request, settings and page info."""
        tenant = context.tenant
        return {
            **route_data.data,
            "shop": {
                "name": tenant.name,
                "url": tenant.shop_url(self.settings.default_shop_domain),
            },
            "request": {"path": context.path, "query": dict(context.query)},
            "settings": theme.settings or {},
            "template": route_data.template,
            "current_page": context.path,
            "canonical_url": context.path,
        }

    def _render(self, name: str, source: str, scope: dict[str, Any]) -> str:
        try:
            return self._compile(source).render(scope)
        except TemplateError as e:
            logger.error("Error rendering template %s: %s", name, e)
            raise TemplateRenderError(name, str(e)) from e

    @traced("storefront.render_page")
    def render(self, theme: Theme, route_data: RouteData, context: RenderContext) -> str:
        """Render the route's template, wrapped in the layout if the theme has one.

        Raises:
            TemplateNotFoundError: Theme has no template named route_data.template.
            TemplateRenderError: Template syntax or runtime error.
        """
        name = route_data.template
        source = theme.get_template(name)
        if source is None:
            raise TemplateNotFoundError(name)
        scope = self.build_scope(theme, route_data, context)
        html = self._render(name, source, scope)
        layout = theme.get_template(LAYOUT_TEMPLATE)
        if layout is None:
            return html
        return self._render(
            LAYOUT_TEMPLATE, layout, {**scope, "content_for_layout": Markup(html)}
        )
