"""Catalog read models: products, variants, collections and static pages.

These are read-only copies of the catalog source of truth (tenant schema or
products-service). They round-trip through the cache as plain dicts.
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProductVariant:
    """Purchasable variant. Prices are in minor units (cents)."""

    id: str
    title: str
    price: int
    sku: str | None = None
    compare_at_price: int | None = None
    inventory_quantity: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductVariant":
        return cls(
            id=str(data["id"]),
            title=data.get("title") or "",
            price=int(data.get("price") or 0),
            sku=data.get("sku"),
            compare_at_price=(
                int(data["compare_at_price"])
                if data.get("compare_at_price") is not None
                else None
            ),
            inventory_quantity=int(data.get("inventory_quantity") or 0),
        )


@dataclass(frozen=True)
class Product:
    """Storefront product with its variants."""

    id: str
    title: str
    handle: str
    status: str = "active"
    description: str | None = None
    vendor: str | None = None
    product_type: str | None = None
    tags: list[str] = field(default_factory=list)
    images: list[str] = field(default_factory=list)
    published_at: str | None = None
    variants: list[ProductVariant] = field(default_factory=list)

    @property
    def price(self) -> int | None:
        """Lowest variant price, or None when the product has no variants."""
        if not self.variants:
            return None
        return min(v.price for v in self.variants)

    @property
    def featured_image(self) -> str | None:
        return self.images[0] if self.images else None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            handle=data["handle"],
            status=data.get("status") or "active",
            description=data.get("description"),
            vendor=data.get("vendor"),
            product_type=data.get("product_type"),
            tags=list(data.get("tags") or []),
            images=list(data.get("images") or []),
            published_at=data.get("published_at"),
            variants=[ProductVariant.from_dict(v) for v in data.get("variants") or []],
        )


@dataclass(frozen=True)
class Collection:
    """Published product collection."""

    id: str
    title: str
    handle: str
    description: str | None = None
    published: bool = True
    product_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Collection":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            handle=data["handle"],
            description=data.get("description"),
            published=bool(data.get("published", True)),
            product_count=int(data.get("product_count") or 0),
        )


@dataclass(frozen=True)
class Page:
    """Static page built in the page builder. content is a JSON-encoded block list."""

    id: str
    title: str
    handle: str
    content: str = "[]"
    is_published: bool = True

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            handle=data["handle"],
            content=data.get("content") or "[]",
            is_published=bool(data.get("is_published", True)),
        )
