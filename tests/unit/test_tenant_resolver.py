"""Tests for host normalization and host -> tenant resolution."""

import pytest

from storefront.application.services.tenant_resolver import TenantResolver, normalize_host
from storefront.infrastructure.cache.memory_cache import MemoryCache
from tests.conftest import SHOP_HOST, FakeTenantRepository, make_tenant


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Shop.Example.com:8080", "shop.example.com"),
        ("shop.example.com.", "shop.example.com"),
        ("  SHOP.example.com ", "shop.example.com"),
        ("[::1]:8000", "[::1]"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_host(raw, expected) -> None:
    assert normalize_host(raw) == expected


@pytest.fixture
def repo() -> FakeTenantRepository:
    return FakeTenantRepository({SHOP_HOST: make_tenant()})


async def test_resolve_caches_found_tenant(repo: FakeTenantRepository) -> None:
    cache = MemoryCache()
    resolver = TenantResolver(repo, cache, ttl=60)
    first = await resolver.resolve(SHOP_HOST)
    second = await resolver.resolve(f"{SHOP_HOST.upper()}:443")
    assert first == second
    assert first.tenant_id == "acme"
    assert repo.calls == [SHOP_HOST]
    assert await cache.get(f"tenant:host:{SHOP_HOST}") == first.to_dict()


async def test_unknown_host_is_not_cached(repo: FakeTenantRepository) -> None:
    cache = MemoryCache()
    resolver = TenantResolver(repo, cache, ttl=60)
    assert await resolver.resolve("nobody.test") is None
    repo.tenants["nobody.test"] = make_tenant("newco")
    tenant = await resolver.resolve("nobody.test")
    assert tenant is not None
    assert tenant.tenant_id == "newco"
    assert repo.calls == ["nobody.test", "nobody.test"]


async def test_empty_host_skips_lookup(repo: FakeTenantRepository) -> None:
    resolver = TenantResolver(repo, MemoryCache(), ttl=60)
    assert await resolver.resolve("") is None
    assert repo.calls == []


async def test_invalidate_forces_reload(repo: FakeTenantRepository) -> None:
    resolver = TenantResolver(repo, MemoryCache(), ttl=60)
    await resolver.resolve(SHOP_HOST)
    await resolver.invalidate(f"{SHOP_HOST}:8080")
    await resolver.resolve(SHOP_HOST)
    assert repo.calls == [SHOP_HOST, SHOP_HOST]
