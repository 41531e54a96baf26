"""Process-local TTL cache (first tier in front of Redis).

Entries expire after their TTL and the least recently used entry is evicted
once max_entries is reached. Values are stored as-is; callers must not
mutate what they get back.
"""

from __future__ import annotations

import fnmatch
import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    value: Any
    expires_at: float


class MemoryCache:
    """In-memory LRU cache with per-entry TTL, exposing the async tier protocol.

    Single event loop only; no locking.
    """

    name = "memory"

    def __init__(self, max_entries: int = 1000, enabled: bool = True, clock=time.monotonic) -> None:
        self.max_entries = max_entries
        self.enabled = enabled
        self._clock = clock
        self._entries: OrderedDict[str, _Entry] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def is_available(self) -> bool:
        return self.enabled

    async def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.expires_at <= self._clock():
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry.value

    async def set(self, key: str, value: Any, ttl: int = 300) -> None:
        if not self.enabled:
            return
        self._entries[key] = _Entry(value=value, expires_at=self._clock() + ttl)
        self._entries.move_to_end(key)
        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Memory cache EVICT: %s", evicted)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def delete_pattern(self, pattern: str) -> int:
        matched = [k for k in self._entries if fnmatch.fnmatchcase(k, pattern)]
        for key in matched:
            del self._entries[key]
        return len(matched)

    def clear(self) -> None:
        self._entries.clear()
