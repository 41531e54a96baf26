"""Checkout and discount results passed from the checkout service to the API layer."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(frozen=True)
class DiscountValidation:
    """Outcome of validating a code. discount is the service's discount object when valid."""

    valid: bool
    discount: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


@dataclass(frozen=True)
class CheckoutResult:
    """Amounts are in minor units."""

    checkout_url: str
    order_id: str
    subtotal: int
    discount: int
    total: int


@dataclass(frozen=True)
class CartItem:
    product_id: str
    quantity: int
    price: int
    variant_id: str | None = None
    title: str | None = None

    @property
    def line_total(self) -> int:
        return self.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class CheckoutRequest:
    """Validated cart submission. Addresses are passed through to checkout-service as-is."""

    items: list[CartItem]
    customer_email: str
    shipping_address: dict[str, Any]
    billing_address: dict[str, Any] | None = None
    discount_code: str | None = None

    @property
    def subtotal(self) -> int:
        return sum(item.line_total for item in self.items)
