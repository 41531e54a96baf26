"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring; no business logic here. Startup
builds the Services container (Redis, database engine, object storage,
shared HTTP client and the render pipeline) unless one was injected into
create_app(), in which case the caller owns its lifecycle.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from storefront.core.config import get_settings
from storefront.core.container import build_services
from storefront.shared.telemetry import get_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: client instrumentation (if telemetry is active),
    services container, SQLAlchemy instrumentation. Shutdown order:
    services close (HTTP client, Redis, engine), telemetry shutdown.
    """
    settings = get_settings()
    telemetry = get_telemetry()

    # ---- Startup ----
    if telemetry is not None:
        # Patch client classes before any client is constructed.
        telemetry.instrument_redis()
        telemetry.instrument_httpx()
        telemetry.instrument_logging()

    owns_services = getattr(app.state, "services", None) is None
    if owns_services:
        app.state.services = await build_services(settings)
        if telemetry is not None:
            telemetry.instrument_sqlalchemy(app.state.services.database.engine)
    app.state.started = True
    logger.info("%s %s started (%s)", settings.app_name, settings.app_version, settings.environment)

    yield

    # ---- Shutdown ----
    app.state.started = False
    if owns_services and app.state.services is not None:
        await app.state.services.close()
        app.state.services = None

    if telemetry is not None:
        telemetry.shutdown()
