"""Generic multi-tier cache-aside lookup.

Tenant resolution, theme loading and catalog listings all follow the same
read path: check each tier in order, fall through to a loader, write the
result back. CacheAside is that read path, parameterised by key builder,
loader, TTL and codec.

A hit in a lower tier back-fills the tiers above it. A loader result of None
(not found) is returned as-is and never cached.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Generic, TypeVar

from storefront.core.metrics import record_cache_lookup
from storefront.infrastructure.cache.cache_protocol import CacheProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


class CacheAside(Generic[T]):
    """Cache-aside over an ordered list of tiers (fastest first).

    Args:
        name: Label for logs and metrics (e.g. "theme").
        tiers: Cache tiers, checked in order.
        key_builder: Builds the logical key from the lookup arguments.
        loader: Loads from the source of truth given the same arguments;
            returns None when the entity does not exist.
        ttl: Seconds each tier keeps an entry.
        encode: Turns a loaded value into a JSON-compatible payload.
        decode: Turns a cached payload back into a value.

    Tier errors (e.g. ServiceUnavailableError from Redis) propagate.
    """

    def __init__(
        self,
        name: str,
        tiers: Sequence[CacheProtocol],
        key_builder: Callable[..., str],
        loader: Callable[..., Awaitable[T | None]],
        ttl: int,
        encode: Callable[[T], Any] = _identity,
        decode: Callable[[Any], T] = _identity,
    ) -> None:
        self.name = name
        self.tiers = list(tiers)
        self.key_builder = key_builder
        self.loader = loader
        self.ttl = ttl
        self.encode = encode
        self.decode = decode

    def _active_tiers(self) -> list[CacheProtocol]:
        return [t for t in self.tiers if t.is_available()]

    async def get(self, *args: Any) -> T | None:
        """Return the value for args from the first tier that has it, else the loader."""
        key = self.key_builder(*args)
        tiers = self._active_tiers()
        for index, tier in enumerate(tiers):
            payload = await tier.get(key)
            record_cache_lookup(self.name, tier.name, payload is not None)
            if payload is None:
                continue
            for upper in tiers[:index]:
                await upper.set(key, payload, self.ttl)
            return self.decode(payload)

        value = await self.loader(*args)
        if value is None:
            logger.debug("%s cache: %s not found at source", self.name, key)
            return None
        payload = self.encode(value)
        for tier in tiers:
            await tier.set(key, payload, self.ttl)
        return value

    async def invalidate(self, *args: Any) -> None:
        """Delete the entry for args from every tier."""
        key = self.key_builder(*args)
        for tier in self._active_tiers():
            await tier.delete(key)
        logger.info("%s cache invalidated: %s", self.name, key)

    async def invalidate_pattern(self, pattern: str) -> int:
        """Delete every key matching pattern from every tier; return the total removed."""
        removed = 0
        for tier in self._active_tiers():
            removed += await tier.delete_pattern(pattern)
        return removed
