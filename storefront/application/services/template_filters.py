"""Storefront template filters.

Pure functions with fixed output formats; themes depend on them verbatim.
Monetary amounts are integer minor units (cents).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from storefront.core.config import Settings

IMAGE_SIZES: dict[str, str] = {
    "small": "100x100",
    "medium": "300x300",
    "large": "600x600",
    "original": "original",
}
DEFAULT_IMAGE_SIZE = "medium"
DEFAULT_TRUNCATE_LENGTH = 50

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def format_money(value: Any, symbol: str = "€") -> str:
    """999 -> "€9.99". Non-numeric input renders as an empty string."""
    try:
        cents = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return ""
    if not cents.is_finite():
        return ""
    return f"{symbol}{cents / 100:.2f}"


def format_money_with_currency(value: Any, symbol: str = "€", code: str = "EUR") -> str:
    """999 -> "€9.99 EUR"."""
    amount = format_money(value, symbol)
    return f"{amount} {code}" if amount else ""


def img_url(src: Any, size: str = DEFAULT_IMAGE_SIZE, base_url: str = "https://cdn.example.com/images") -> str:
    """CDN URL for an image at a named size; unknown sizes fall back to medium."""
    dimensions = IMAGE_SIZES.get(size, IMAGE_SIZES[DEFAULT_IMAGE_SIZE])
    return f"{base_url.rstrip('/')}/{dimensions}/{src}"


def product_url(handle: Any) -> str:
    return f"/products/{handle}"


def collection_url(handle: Any) -> str:
    return f"/collections/{handle}"


def handleize(value: Any) -> str:
    """"My Cool Product!!" -> "my-cool-product"."""
    return _NON_ALNUM_RE.sub("-", str(value).lower()).strip("-")


def truncate(value: Any, length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
    """First length characters plus "..." when the string is longer."""
    text = "" if value is None else str(value)
    if len(text) <= length:
        return text
    return text[:length] + "..."


def build_filters(settings: Settings) -> dict[str, Callable[..., str]]:
    """Filters bound to the configured currency and image CDN."""
    symbol = settings.currency_symbol
    code = settings.currency_code
    base = settings.image_cdn_base_url

    def money(value: Any) -> str:
        return format_money(value, symbol)

    def money_with_currency(value: Any) -> str:
        return format_money_with_currency(value, symbol, code)

    def image(src: Any, size: str = DEFAULT_IMAGE_SIZE) -> str:
        return img_url(src, size, base)

    return {
        "money": money,
        "money_with_currency": money_with_currency,
        "img_url": image,
        "product_url": product_url,
        "collection_url": collection_url,
        "handleize": handleize,
        "truncate": truncate,
    }
