"""Router aggregation.

api_router carries the fixed routes; storefront_router carries the
catch-all page render and must be included last.
"""

from fastapi import APIRouter

from storefront.api.endpoints import cart, health, metrics, preview, storefront

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(metrics.router, tags=["metrics"])
api_router.include_router(cart.router, prefix="/cart", tags=["cart"])
api_router.include_router(preview.router, tags=["preview"])

storefront_router = APIRouter()
storefront_router.include_router(storefront.router, tags=["storefront"])

# Probes and scrapes are never rate limited.
RATE_LIMIT_EXEMPT = (
    health.liveness,
    health.readiness,
    health.startup,
    metrics.metrics,
)
