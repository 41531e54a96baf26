"""Render pipeline value objects (built per request, never cached whole)."""

from dataclasses import dataclass, field
from typing import Any

from storefront.domain.entities.tenant import Tenant
from storefront.domain.enums import PageType


@dataclass(frozen=True)
class RouteData:
    """Which template to render and the data it binds.

    data keys are template variables: home binds collections and
    featured_products (also as products), product binds product, collection
    binds collection and products, page binds page.
    """

    type: PageType
    template: str
    data: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderContext:
    """Request-level context bound into every template."""

    tenant: Tenant
    path: str
    query: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderResult:
    """Rendered page plus the metadata the endpoint turns into headers."""

    html: str
    tenant_id: str
    theme_version: str
    page_type: PageType
    render_ms: int
