"""Domain entities: tenant, theme, catalog read models and content blocks.

Pure data; no ORM or persistence concerns.
"""

from storefront.domain.entities.blocks import ContentBlock, UnknownBlock, parse_block, parse_blocks
from storefront.domain.entities.catalog import Collection, Page, Product, ProductVariant
from storefront.domain.entities.tenant import Tenant
from storefront.domain.entities.theme import Theme

__all__ = [
    "Collection",
    "ContentBlock",
    "Page",
    "Product",
    "ProductVariant",
    "Tenant",
    "Theme",
    "UnknownBlock",
    "parse_block",
    "parse_blocks",
]
