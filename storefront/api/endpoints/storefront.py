"""Storefront page render (catch-all GET, dispatched by Host header).

Response headers let the CDN cache pages and purge them by tenant:

    Surrogate-Key: tenant_{id} page_{type}
    Cache-Control: public, max-age=N, s-maxage=N
"""

from fastapi import APIRouter, BackgroundTasks, Request
from fastapi.responses import HTMLResponse

from storefront.api.dependencies import HostDep, ServicesDep
from storefront.application.dtos.render import RenderResult
from storefront.infrastructure.external.cdn.cloudflare import tenant_tag

router = APIRouter()


def render_headers(result: RenderResult, max_age: int) -> dict[str, str]:
    """Response headers for a rendered page."""
    return {
        "X-Tenant-ID": result.tenant_id,
        "X-Render-Time": f"{result.render_ms}ms",
        "X-Theme-Version": result.theme_version,
        "Surrogate-Key": f"{tenant_tag(result.tenant_id)} page_{result.page_type.value}",
        "Cache-Control": f"public, max-age={max_age}, s-maxage={max_age}",
        "CDN-Cache-Control": f"max-age={max_age}",
        "Vary": "Accept-Encoding",
    }


@router.get("/{path:path}", response_class=HTMLResponse)
async def render_page(
    path: str,
    request: Request,
    host: HostDep,
    services: ServicesDep,
    background_tasks: BackgroundTasks,
) -> HTMLResponse:
    """Render the tenant page at path.

    404 (HTML) for an unknown host, 404 for an unknown route or handle,
    500 when the tenant has no theme or the template is missing.
    """
    request_path = f"/{path}"
    result = await services.storefront.render(
        host, request_path, dict(request.query_params)
    )
    background_tasks.add_task(
        services.analytics.track,
        result.tenant_id,
        "page_view",
        {"path": request_path, "page_type": result.page_type.value},
    )
    return HTMLResponse(
        content=result.html,
        headers=render_headers(result, services.settings.page_cache_max_age),
    )
