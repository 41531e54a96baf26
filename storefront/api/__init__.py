"""HTTP API: storefront render, cart, preview, health and metrics routes."""

from storefront.api.router import api_router, storefront_router

__all__ = ["api_router", "storefront_router"]
