"""Health probes: liveness, readiness and startup.

Readiness reports per-dependency booleans; Redis counts as healthy when it
is disabled by configuration.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from storefront.api.dependencies import ServicesDep
from storefront.schemas.health import DependencyChecks, LivenessResponse, ReadinessResponse

router = APIRouter()

_NOT_READY_RESPONSES = {503: {"description": "A dependency is down", "model": ReadinessResponse}}


async def _check(services: ServicesDep) -> DependencyChecks:
    redis_ok = await services.redis.ping() if services.settings.redis_enabled else True
    return DependencyChecks(database=await services.database.ping(), redis=redis_ok)


def _respond(checks: DependencyChecks, ready: bool = True) -> ReadinessResponse | JSONResponse:
    if ready and checks.database and checks.redis:
        return ReadinessResponse(checks=checks)
    return JSONResponse(
        status_code=503,
        content=ReadinessResponse(status="not_ready", checks=checks).model_dump(),
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Return ok while the process serves requests."""
    return LivenessResponse()


@router.get("/ready", response_model=ReadinessResponse, responses=_NOT_READY_RESPONSES)
async def readiness(services: ServicesDep) -> ReadinessResponse | JSONResponse:
    """200 when the database and Redis answer, else 503."""
    return _respond(await _check(services))


@router.get("/startup", response_model=ReadinessResponse, responses=_NOT_READY_RESPONSES)
async def startup(request: Request, services: ServicesDep) -> ReadinessResponse | JSONResponse:
    """Like readiness, but also 503 until the lifespan finished starting up."""
    started = bool(getattr(request.app.state, "started", False))
    return _respond(await _check(services), ready=started)
