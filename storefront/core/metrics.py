"""Prometheus metrics for the render pipeline.

Collectors are module-level so they register once per process with the
default registry; /metrics exposes them via generate_latest().
"""

from prometheus_client import Counter, Histogram

RENDER_DURATION = Histogram(
    "storefront_render_duration_seconds",
    "Storefront page render duration (tenant resolution through HTML)",
    ["page_type"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5),
)

RENDER_OUTCOMES = Counter(
    "storefront_renders_total",
    "Storefront render attempts by outcome",
    ["outcome"],
)

CACHE_LOOKUPS = Counter(
    "storefront_cache_lookups_total",
    "Cache-aside lookups by cache, tier and result",
    ["cache", "tier", "result"],
)

REMOTE_CALLS = Counter(
    "storefront_remote_calls_total",
    "Calls to platform microservices by service and outcome",
    ["service", "outcome"],
)

CDN_PURGES = Counter(
    "storefront_cdn_purges_total",
    "Tag-based CDN purge attempts by outcome",
    ["outcome"],
)


def record_cache_lookup(cache: str, tier: str, hit: bool) -> None:
    CACHE_LOOKUPS.labels(cache=cache, tier=tier, result="hit" if hit else "miss").inc()


def record_render(page_type: str, outcome: str, duration_seconds: float | None = None) -> None:
    """Count a render outcome; observe duration only for completed renders."""
    RENDER_OUTCOMES.labels(outcome=outcome).inc()
    if duration_seconds is not None:
        RENDER_DURATION.labels(page_type=page_type).observe(duration_seconds)
