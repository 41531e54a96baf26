"""Tenant theme loading: memory -> Redis -> database + object storage.

Theme layout in storage::

    {s3_key}/templates/{name}{extension}    e.g. themes/acme/v3/templates/index.liquid

A missing template file is tolerated (logged and left out of the bundle);
any other storage error propagates.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace

from storefront.application.interfaces.repositories import IThemeRepository
from storefront.application.interfaces.services import ICdnPurger
from storefront.core.constants import THEME_TEMPLATE_NAMES
from storefront.domain.entities.theme import Theme
from storefront.infrastructure.cache.cache_aside import CacheAside
from storefront.infrastructure.cache.cache_protocol import CacheProtocol
from storefront.infrastructure.cache.keys import theme_key
from storefront.infrastructure.exceptions import StorageNotFoundError
from storefront.infrastructure.external.storage.protocol import StorageProtocol
from storefront.shared.telemetry import traced

logger = logging.getLogger(__name__)


class ThemeLoader:
    """Loads a tenant's main theme with two cache tiers in front of storage.

    Both tiers share key theme:{tenant_id} and TTL; a storage load populates
    both before returning, and a Redis hit back-fills memory.
    """

    def __init__(
        self,
        repository: IThemeRepository,
        storage: StorageProtocol,
        memory_cache: CacheProtocol,
        redis_cache: CacheProtocol,
        ttl: int,
        purger: ICdnPurger,
        template_extension: str = ".liquid",
        template_names: tuple[str, ...] = THEME_TEMPLATE_NAMES,
    ) -> None:
        self.repository = repository
        self.storage = storage
        self.purger = purger
        self.template_extension = template_extension
        self.template_names = template_names
        self._cache = CacheAside(
            "theme",
            [memory_cache, redis_cache],
            key_builder=theme_key,
            loader=self._load_from_storage,
            ttl=ttl,
            encode=Theme.to_dict,
            decode=Theme.from_dict,
        )

    @traced("storefront.load_theme")
    async def load(self, tenant_id: str) -> Theme | None:
        return await self._cache.get(tenant_id)

    def template_key(self, s3_key: str, name: str) -> str:
        return f"{s3_key}/templates/{name}{self.template_extension}"

    async def _fetch_template(self, s3_key: str, name: str) -> str | None:
        key = self.template_key(s3_key, name)
        try:
            return await self.storage.read_text(key)
        except StorageNotFoundError:
            logger.debug("Theme template %s not present at %s", name, key)
            return None

    async def _load_from_storage(self, tenant_id: str) -> Theme | None:
        theme = await self.repository.get_main_theme(tenant_id)
        if theme is None:
            logger.warning("No main theme configured for tenant %s", tenant_id)
            return None
        results = await asyncio.gather(
            *(self._fetch_template(theme.s3_key, name) for name in self.template_names),
            return_exceptions=True,
        )
        templates: dict[str, str] = {}
        for name, result in zip(self.template_names, results):
            if isinstance(result, BaseException):
                raise result
            if result is not None:
                templates[name] = result
        logger.info(
            "Theme loaded from storage: tenant=%s theme=%s version=%s templates=%s",
            tenant_id,
            theme.id,
            theme.version,
            sorted(templates),
        )
        return replace(theme, templates=templates)

    async def invalidate(self, tenant_id: str) -> None:
        """Clear both tiers; call after any theme publish."""
        await self._cache.invalidate(tenant_id)

    async def purge_cdn(self, tenant_id: str) -> bool:
        """Best-effort edge purge of every page tagged with the tenant."""
        return await self.purger.purge_tenant(tenant_id)
