"""Cache key builders. Single place for key format.

These keys are shared with other platform services that warm or purge the
renderer's cache, so their shape must not change. Every catalog key starts
with {prefix}:{tenant_id}: so a tenant's entries can be purged by pattern.

Key components (host, tenant_id, handle) must not contain CACHE_KEY_SEP.
"""

import json
from dataclasses import fields
from typing import Any

from storefront.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_COLLECTIONS,
    CACHE_PREFIX_PAGES,
    CACHE_PREFIX_PRODUCTS,
    CACHE_PREFIX_SERVICE_PRODUCT,
    CACHE_PREFIX_SERVICE_PRODUCTS,
    CACHE_PREFIX_TENANT_HOST,
    CACHE_PREFIX_THEME,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the cache key separator."""
    if not value or CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must be non-empty and must not contain "
            f"separator {CACHE_KEY_SEP!r}"
        )


def filter_json(query: Any) -> str:
    """Compact JSON of the explicitly-set fields of a filter, in declaration order.

    Accepts a filter dataclass (unset fields are None and are omitted) or a
    plain dict of options. Matches JSON.stringify output for the same options
    object, which keeps keys compatible with existing cache populations.
    """
    if isinstance(query, dict):
        data = {k: v for k, v in query.items() if v is not None}
    else:
        data = {
            f.name: getattr(query, f.name)
            for f in fields(query)
            if getattr(query, f.name) is not None
        }
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def tenant_host_key(host: str) -> str:
    """tenant:host:{host}"""
    return f"{CACHE_PREFIX_TENANT_HOST}{CACHE_KEY_SEP}{host}"


def theme_key(tenant_id: str) -> str:
    """theme:{tenant_id}"""
    _validate_key_component(tenant_id, "tenant_id")
    return f"{CACHE_PREFIX_THEME}{CACHE_KEY_SEP}{tenant_id}"


def products_key(tenant_id: str, query: Any) -> str:
    _validate_key_component(tenant_id, "tenant_id")
    return f"{CACHE_PREFIX_PRODUCTS}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}{filter_json(query)}"


def collections_key(tenant_id: str, query: Any) -> str:
    _validate_key_component(tenant_id, "tenant_id")
    return f"{CACHE_PREFIX_COLLECTIONS}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}{filter_json(query)}"


def pages_key(tenant_id: str, query: Any) -> str:
    _validate_key_component(tenant_id, "tenant_id")
    return f"{CACHE_PREFIX_PAGES}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}{filter_json(query)}"


def service_products_key(tenant_id: str, options: dict[str, Any]) -> str:
    """storefront:products:{tenant_id}:{json(options)} (products-service listings)."""
    _validate_key_component(tenant_id, "tenant_id")
    return (
        f"{CACHE_PREFIX_SERVICE_PRODUCTS}{CACHE_KEY_SEP}{tenant_id}"
        f"{CACHE_KEY_SEP}{filter_json(options)}"
    )


def service_product_key(tenant_id: str, handle: str) -> str:
    _validate_key_component(tenant_id, "tenant_id")
    _validate_key_component(handle, "handle")
    return f"{CACHE_PREFIX_SERVICE_PRODUCT}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}{handle}"


def tenant_catalog_patterns(tenant_id: str) -> list[str]:
    """SCAN patterns covering every catalog key of a tenant, whatever the filter shape."""
    _validate_key_component(tenant_id, "tenant_id")
    prefixes = (
        CACHE_PREFIX_PRODUCTS,
        CACHE_PREFIX_COLLECTIONS,
        CACHE_PREFIX_PAGES,
        CACHE_PREFIX_SERVICE_PRODUCTS,
        CACHE_PREFIX_SERVICE_PRODUCT,
    )
    return [f"{p}{CACHE_KEY_SEP}{tenant_id}{CACHE_KEY_SEP}*" for p in prefixes]
