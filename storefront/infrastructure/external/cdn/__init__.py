"""Edge cache purging."""

from storefront.infrastructure.external.cdn.cloudflare import CloudflarePurger

__all__ = ["CloudflarePurger"]
