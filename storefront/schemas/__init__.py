"""Request/response schemas for the JSON endpoints."""

from storefront.schemas.cart import (
    CheckoutRequestSchema,
    CheckoutResponse,
    ValidateDiscountRequest,
    ValidateDiscountResponse,
)
from storefront.schemas.health import LivenessResponse, ReadinessResponse
from storefront.schemas.preview import PreviewRequest

__all__ = [
    "CheckoutRequestSchema",
    "CheckoutResponse",
    "LivenessResponse",
    "PreviewRequest",
    "ReadinessResponse",
    "ValidateDiscountRequest",
    "ValidateDiscountResponse",
]
