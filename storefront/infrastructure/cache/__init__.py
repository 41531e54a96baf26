"""Cache tiers (process memory, Redis), key builders and the cache-aside helper."""

from storefront.infrastructure.cache.cache_aside import CacheAside
from storefront.infrastructure.cache.cache_protocol import CacheProtocol
from storefront.infrastructure.cache.memory_cache import MemoryCache
from storefront.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheAside", "CacheProtocol", "CacheService", "MemoryCache"]
