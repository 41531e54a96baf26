"""Core: config, constants, DI container and application bootstrap."""

from storefront.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
