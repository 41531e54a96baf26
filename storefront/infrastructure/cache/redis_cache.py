"""Redis-backed distributed cache tier.

Every key is stored under settings.redis_key_prefix so the renderer can share
a Redis instance with other platform services. Callers pass logical keys
built by storefront.infrastructure.cache.keys.

Unlike a best-effort cache, failures here are not swallowed: tenant and theme
resolution depend on this tier, so a Redis outage surfaces as
ServiceUnavailableError after one reconnect attempt.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import redis.asyncio as redis

from storefront.core.config import Settings, get_settings
from storefront.domain.exceptions import ServiceUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_SCAN_CHUNK_SIZE = 500


class CacheService:
    """Async Redis cache with TTL support and prefix-scan invalidation.

    Call connect() at startup and disconnect() at shutdown. When
    settings.redis_enabled is False the tier is inert: get() misses and
    writes are no-ops.
    """

    name = "redis"

    def __init__(
        self,
        settings: Settings | None = None,
        redis_client: redis.Redis | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            settings: Settings to read connection details from (default: get_settings()).
            redis_client: Optional Redis client for testing or DI.
        """
        self.settings = settings or get_settings()
        self.redis = redis_client
        self.prefix = self.settings.redis_key_prefix
        self._connected = redis_client is not None

    def _build_client(self) -> redis.Redis:
        s = self.settings
        return redis.Redis(
            host=s.redis_host,
            port=s.redis_port,
            db=s.redis_db,
            password=s.redis_password.get_secret_value() if s.redis_password else None,
            decode_responses=True,
            socket_connect_timeout=s.redis_socket_timeout,
            socket_timeout=s.redis_socket_timeout,
            socket_keepalive=True,
            max_connections=s.redis_max_connections,
        )

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup.

        A failed connection is logged, not raised: the first cache operation
        retries and raises ServiceUnavailableError if Redis is still down.
        """
        if not self.settings.redis_enabled or self.redis is not None:
            return
        self.redis = self._build_client()
        try:
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed at startup: %s", e)
            self._connected = False

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Replace the client and ping. Returns True if Redis answered."""
        if self.redis is not None:
            try:
                await self.redis.aclose()
            except redis.RedisError:
                logger.debug("Ignoring error while closing stale Redis client")
        self.redis = self._build_client()
        try:
            await self.redis.ping()
            self._connected = True
        except (redis.ConnectionError, redis.TimeoutError):
            self._connected = False
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is enabled (a down server still counts; ops will raise)."""
        return self.settings.redis_enabled and self.redis is not None

    def _k(self, key: str) -> str:
        return f"{self.prefix}{key}"

    async def _execute(
        self, op: str, key: str, call: Callable[[redis.Redis], Awaitable[T]]
    ) -> T:
        """Run a Redis call, reconnecting once on connection loss.

        Raises:
            ServiceUnavailableError: Redis unreachable or returned an error.
        """
        assert self.redis is not None
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis %s failed for %s: %s; reconnecting", op, key, e)
            if await self._reconnect():
                try:
                    return await call(self.redis)
                except redis.RedisError as retry_error:
                    raise ServiceUnavailableError("redis", str(retry_error)) from retry_error
            raise ServiceUnavailableError("redis", str(e)) from e
        except redis.RedisError as e:
            logger.exception("Redis %s error for key %s", op, key)
            raise ServiceUnavailableError("redis", str(e)) from e

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-decoded) or None on a miss.

        Args:
            key: Logical cache key (see keys.py).

        Raises:
            ServiceUnavailableError: Redis unreachable.
        """
        if not self.is_available():
            return None
        value = await self._execute("get", key, lambda r: r.get(self._k(key)))
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return json.loads(value)

    async def set(self, key: str, value: Any, ttl: int = 300) -> None:
        """Store a JSON-serializable value with TTL in seconds."""
        if not self.is_available():
            return
        serialized = json.dumps(value)
        await self._execute("set", key, lambda r: r.setex(self._k(key), ttl, serialized))
        logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)

    async def delete(self, key: str) -> None:
        if not self.is_available():
            return
        await self._execute("delete", key, lambda r: r.delete(self._k(key)))
        logger.debug("Cache DELETE: %s", key)

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + batched UNLINK (non-blocking).

        Args:
            pattern: Logical glob pattern (e.g. products:acme:*); the key prefix
                is added here.

        Returns:
            Number of keys deleted.
        """
        if not self.is_available():
            return 0

        async def _scan_unlink(client: redis.Redis) -> int:
            deleted = 0
            chunk: list[str] = []
            async for key in client.scan_iter(match=self._k(pattern), count=_SCAN_CHUNK_SIZE):
                chunk.append(key)
                if len(chunk) >= _SCAN_CHUNK_SIZE:
                    deleted += int(await client.unlink(*chunk) or 0)
                    chunk = []
            if chunk:
                deleted += int(await client.unlink(*chunk) or 0)
            return deleted

        deleted = await self._execute("delete_pattern", pattern, _scan_unlink)
        if deleted > 0:
            logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted

    async def ping(self) -> bool:
        """Health probe: True if Redis answers PING. Never raises."""
        if not self.is_available():
            return False
        try:
            return bool(await self.redis.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False
