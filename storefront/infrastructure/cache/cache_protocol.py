"""Cache tier protocol shared by the Redis and in-process caches."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """One cache tier. Values are JSON-compatible; keys are logical (unprefixed)."""

    name: str

    def is_available(self) -> bool:
        """Return True if the tier is enabled and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Store value with TTL in seconds."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key from cache."""
        ...

    async def delete_pattern(self, pattern: str) -> int:
        """Remove every key matching a glob pattern; return the count removed."""
        ...
