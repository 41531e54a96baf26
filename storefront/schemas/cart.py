"""Cart API schemas (checkout and discount validation).

Amounts are integer minor units (cents).
"""

from typing import Any

from pydantic import BaseModel, EmailStr, Field

from storefront.application.dtos.checkout import CartItem, CheckoutRequest


class CartItemSchema(BaseModel):
    product_id: str = Field(..., min_length=1, max_length=64)
    variant_id: str | None = Field(default=None, max_length=64)
    title: str | None = Field(default=None, max_length=255)
    quantity: int = Field(..., ge=1, le=1000)
    price: int = Field(..., ge=0, description="Unit price in minor units")

    def to_dto(self) -> CartItem:
        return CartItem(
            product_id=self.product_id,
            variant_id=self.variant_id,
            title=self.title,
            quantity=self.quantity,
            price=self.price,
        )


class AddressSchema(BaseModel):
    """Postal address. Extra fields are passed through to checkout-service."""

    model_config = {"extra": "allow"}

    name: str | None = Field(default=None, max_length=255)
    line1: str = Field(..., min_length=1, max_length=255)
    line2: str | None = Field(default=None, max_length=255)
    city: str = Field(..., min_length=1, max_length=128)
    postal_code: str = Field(..., min_length=1, max_length=32)
    country: str = Field(..., min_length=2, max_length=64)


class CheckoutRequestSchema(BaseModel):
    """Request body for POST /cart/checkout."""

    items: list[CartItemSchema] = Field(..., min_length=1, description="Cart lines (non-empty)")
    customer_email: EmailStr
    shipping_address: AddressSchema
    billing_address: AddressSchema | None = Field(
        default=None, description="Defaults to the shipping address"
    )
    discount_code: str | None = Field(default=None, min_length=1, max_length=64)

    def to_dto(self) -> CheckoutRequest:
        return CheckoutRequest(
            items=[item.to_dto() for item in self.items],
            customer_email=str(self.customer_email),
            shipping_address=self.shipping_address.model_dump(exclude_none=True),
            billing_address=(
                self.billing_address.model_dump(exclude_none=True)
                if self.billing_address
                else None
            ),
            discount_code=self.discount_code,
        )


class CheckoutResponse(BaseModel):
    success: bool = True
    checkout_url: str
    order_id: str
    subtotal: int
    discount: int
    total: int


class ValidateDiscountRequest(BaseModel):
    """Request body for POST /cart/validate-discount."""

    code: str = Field(..., min_length=1, max_length=64)
    subtotal: int = Field(..., gt=0, description="Cart subtotal in minor units")


class ValidateDiscountResponse(BaseModel):
    valid: bool
    discount: dict[str, Any] | None = None
    discount_amount: int = 0
    total: int | None = None
    error: str | None = None
