"""Rate limiter for SlowAPI.

One default limit (RATE_LIMIT_MAX_REQUESTS per RATE_LIMIT_WINDOW_SECONDS per
client address) applies to every route through SlowAPIMiddleware; probes and
the metrics scrape are exempted by create_app().
"""

from collections.abc import Callable, Iterable

from slowapi import Limiter
from slowapi.util import get_remote_address

from storefront.core.config import Settings


def default_limit(settings: Settings) -> str:
    """Limit string in limits notation, e.g. "100/60 seconds"."""
    return f"{settings.rate_limit_max_requests}/{settings.rate_limit_window_seconds} seconds"


def build_limiter(settings: Settings, exempt: Iterable[Callable] = ()) -> Limiter:
    """Create the app's limiter and exempt the given endpoint functions."""
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit(settings)],
        storage_uri=settings.rate_limit_storage_uri,
        enabled=settings.rate_limit_enabled,
        headers_enabled=False,
    )
    for endpoint in exempt:
        limiter.exempt(endpoint)
    return limiter
