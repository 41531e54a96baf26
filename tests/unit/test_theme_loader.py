"""Tests for two-tier theme loading from object storage."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from storefront.application.services.theme_loader import ThemeLoader
from storefront.domain.entities.theme import Theme
from storefront.infrastructure.cache.memory_cache import MemoryCache
from storefront.infrastructure.exceptions import StorageReadError
from tests.conftest import TEMPLATES, THEME_PREFIX, FakeStorage, FakeThemeRepository


@pytest.fixture
def repo(theme: Theme) -> FakeThemeRepository:
    return FakeThemeRepository({"acme": theme})


@pytest.fixture
def memory() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def redis_tier() -> MemoryCache:
    return MemoryCache()


@pytest.fixture
def purger() -> AsyncMock:
    return AsyncMock(purge_tenant=AsyncMock(return_value=True))


@pytest.fixture
def loader(repo, storage, memory, redis_tier, purger) -> ThemeLoader:
    return ThemeLoader(repo, storage, memory, redis_tier, ttl=60, purger=purger)


async def test_load_reads_every_template_once(
    loader: ThemeLoader, storage: FakeStorage, repo: FakeThemeRepository
) -> None:
    theme = await loader.load("acme")
    assert theme.version == "3"
    assert theme.templates == TEMPLATES
    # cart and search are absent from storage but still attempted
    assert len(storage.reads) == 7
    assert f"{THEME_PREFIX}/templates/cart.liquid" in storage.reads

    again = await loader.load("acme")
    assert again == theme
    assert len(storage.reads) == 7
    assert repo.calls == ["acme"]


async def test_load_populates_both_tiers(
    loader: ThemeLoader, memory: MemoryCache, redis_tier: MemoryCache
) -> None:
    theme = await loader.load("acme")
    assert await memory.get("theme:acme") == theme.to_dict()
    assert await redis_tier.get("theme:acme") == theme.to_dict()


async def test_redis_hit_backfills_memory(
    loader: ThemeLoader, storage: FakeStorage, memory: MemoryCache
) -> None:
    await loader.load("acme")
    memory.clear()
    reads = len(storage.reads)
    theme = await loader.load("acme")
    assert theme is not None
    assert len(storage.reads) == reads
    assert await memory.get("theme:acme") is not None


async def test_missing_theme_is_none_and_not_cached(
    loader: ThemeLoader, repo: FakeThemeRepository, memory: MemoryCache
) -> None:
    assert await loader.load("ghost") is None
    assert await loader.load("ghost") is None
    assert repo.calls == ["ghost", "ghost"]
    assert len(memory) == 0


async def test_storage_errors_other_than_missing_propagate(
    repo: FakeThemeRepository, memory: MemoryCache, redis_tier: MemoryCache, purger: AsyncMock
) -> None:
    storage = FakeStorage()
    storage.read_text = AsyncMock(side_effect=StorageReadError("k", "boom"))
    loader = ThemeLoader(repo, storage, memory, redis_tier, ttl=60, purger=purger)
    with pytest.raises(StorageReadError):
        await loader.load("acme")
    assert len(memory) == 0


class FlakyStorage(FakeStorage):
    """Fails the named templates after N loop turns; others answer after three."""

    def __init__(self, objects: dict[str, str], failing: dict[str, int]) -> None:
        super().__init__(objects)
        self.failing = failing
        self.completed: list[str] = []

    async def read_text(self, key: str, encoding: str = "utf-8") -> str:
        name = key.rsplit("/", 1)[-1].removesuffix(".liquid")
        if name in self.failing:
            for _ in range(self.failing[name]):
                await asyncio.sleep(0)
            raise StorageReadError(key, "boom")
        for _ in range(3):
            await asyncio.sleep(0)
        try:
            return await super().read_text(key, encoding)
        finally:
            self.completed.append(key)


async def test_storage_error_waits_for_sibling_fetches(
    repo: FakeThemeRepository, memory: MemoryCache, redis_tier: MemoryCache, purger: AsyncMock
) -> None:
    storage = FlakyStorage(
        {f"{THEME_PREFIX}/templates/{n}.liquid": s for n, s in TEMPLATES.items()},
        failing={"index": 0},
    )
    loader = ThemeLoader(repo, storage, memory, redis_tier, ttl=60, purger=purger)
    with pytest.raises(StorageReadError):
        await loader.load("acme")
    # every other fetch finished before the error surfaced
    assert len(storage.completed) == 6
    assert len(memory) == 0


async def test_first_failing_template_in_order_is_raised(
    repo: FakeThemeRepository, memory: MemoryCache, redis_tier: MemoryCache, purger: AsyncMock
) -> None:
    storage = FlakyStorage({}, failing={"index": 5, "collection": 0})
    loader = ThemeLoader(repo, storage, memory, redis_tier, ttl=60, purger=purger)
    with pytest.raises(StorageReadError) as exc_info:
        await loader.load("acme")
    assert exc_info.value.details["key"] == f"{THEME_PREFIX}/templates/index.liquid"


async def test_invalidate_clears_both_tiers(
    loader: ThemeLoader, memory: MemoryCache, redis_tier: MemoryCache, storage: FakeStorage
) -> None:
    await loader.load("acme")
    await loader.invalidate("acme")
    assert await memory.get("theme:acme") is None
    assert await redis_tier.get("theme:acme") is None
    await loader.load("acme")
    assert len(storage.reads) == 14


async def test_purge_cdn_delegates_to_purger(loader: ThemeLoader, purger: AsyncMock) -> None:
    assert await loader.purge_cdn("acme") is True
    purger.purge_tenant.assert_awaited_once_with("acme")


def test_template_key(loader: ThemeLoader) -> None:
    assert loader.template_key("themes/x/v1", "index") == "themes/x/v1/templates/index.liquid"
