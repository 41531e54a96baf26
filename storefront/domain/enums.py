"""Domain enumerations for the storefront renderer."""

from enum import Enum


class TenantStatus(str, Enum):
    """Tenant lifecycle status in the platform registry.

    Only ACTIVE tenants are served by the storefront.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid status values as strings."""
        return [status.value for status in cls]


class PageType(str, Enum):
    """Kind of storefront page a path resolved to (used in cache tags and metrics)."""

    HOME = "home"
    PRODUCT = "product"
    COLLECTION = "collection"
    PAGE = "page"


class BlockType(str, Enum):
    """Page-builder block type tags understood by the block renderer."""

    HERO = "hero"
    TEXT = "text"
    IMAGE = "image"
    PRODUCTS = "products"
    VIDEO = "video"
    GALLERY = "gallery"


class DiscountType(str, Enum):
    """Discount kinds returned by the discounts service."""

    PERCENTAGE = "percentage"
    FIXED = "fixed"
