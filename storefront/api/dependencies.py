"""FastAPI dependencies: the services container and the request's tenant.

Endpoints never construct clients or services; everything comes from the
Services container the lifespan (or a test) put on app.state.
"""

from typing import Annotated

from fastapi import Depends, Request

from storefront.core.container import Services
from storefront.domain.entities.tenant import Tenant
from storefront.domain.exceptions import ServiceUnavailableError, TenantNotFoundError


def get_services(request: Request) -> Services:
    services = getattr(request.app.state, "services", None)
    if services is None:
        raise ServiceUnavailableError("services", "application is starting up")
    return services


def get_host(request: Request) -> str:
    """Host the shopper asked for (Host header, falling back to the URL)."""
    return request.headers.get("host") or request.url.hostname or ""


ServicesDep = Annotated[Services, Depends(get_services)]
HostDep = Annotated[str, Depends(get_host)]


async def get_current_tenant(services: ServicesDep, host: HostDep) -> Tenant:
    """Resolve the tenant for the Host header.

    Raises:
        TenantNotFoundError: No active tenant serves this host.
    """
    tenant = await services.tenants.resolve(host)
    if tenant is None:
        raise TenantNotFoundError(host)
    return tenant


TenantDep = Annotated[Tenant, Depends(get_current_tenant)]
