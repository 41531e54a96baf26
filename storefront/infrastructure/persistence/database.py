"""Persistence: async engine, session factory, and Base for SQLAlchemy ORM.

One Postgres database holds the platform registry (schema "platform") and one
schema per tenant ("tenant_{tenant_id}"). Tenant-scoped models are declared
in the placeholder schema TENANT_SCHEMA; tenant_session() maps it to the real
schema through schema_translate_map, so every query of that session is
confined to one tenant.

Schemas are owned by the platform's migrations; the renderer only reads.
"""

from __future__ import annotations

import logging
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from storefront.core.config import Settings
from storefront.domain.exceptions import InvalidTenantIdError

logger = logging.getLogger(__name__)

PLATFORM_SCHEMA = "platform"
TENANT_SCHEMA = "tenant"

# Tenant ids end up in schema names; keep them to a safe identifier alphabet.
_TENANT_ID_MAX_LENGTH = 48
_TENANT_ID_RE = re.compile(r"^[a-z0-9_]{1," + str(_TENANT_ID_MAX_LENGTH) + r"}$")


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy declarative models."""


def is_valid_tenant_id(value: str) -> bool:
    """Return True if value is safe to use in a schema name (format + length)."""
    return bool(value) and bool(_TENANT_ID_RE.fullmatch(value))


class Database:
    """Owns the async engine and hands out platform or tenant-scoped sessions.

    Built once in the lifespan and shared by every repository.
    """

    def __init__(self, settings: Settings, engine: AsyncEngine | None = None) -> None:
        self.settings = settings
        self.engine = engine or self._create_engine(settings)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @staticmethod
    def _create_engine(settings: Settings) -> AsyncEngine:
        connect_args: dict[str, Any] = {}
        if "asyncpg" in settings.database_url:
            connect_args["command_timeout"] = settings.db_command_timeout
        return create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            pool_recycle=3600,
            connect_args=connect_args,
        )

    def tenant_schema(self, tenant_id: str) -> str:
        """Schema name for a tenant (tenant_{tenant_id} by default).

        Raises:
            InvalidTenantIdError: tenant_id has characters not allowed in a schema name.
        """
        if not is_valid_tenant_id(tenant_id):
            raise InvalidTenantIdError(tenant_id)
        return f"{self.settings.tenant_schema_prefix}{tenant_id}"

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Read-only session for the platform registry."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def tenant_session(self, tenant_id: str) -> AsyncIterator[AsyncSession]:
        """Read-only session whose tenant-schema models resolve to tenant_id's schema."""
        bind = self.engine.execution_options(
            schema_translate_map={TENANT_SCHEMA: self.tenant_schema(tenant_id)}
        )
        async with self.session_factory(bind=bind) as session:
            yield session

    async def ping(self) -> bool:
        """Health probe: True if SELECT 1 succeeds. Never raises."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database health check failed: %s", e)
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database engine disposed")
