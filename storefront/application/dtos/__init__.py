"""Application DTOs: catalog filters, render pipeline values, checkout results."""

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.application.dtos.checkout import (
    CartItem,
    CheckoutRequest,
    CheckoutResult,
    DiscountValidation,
)
from storefront.application.dtos.render import RenderContext, RenderResult, RouteData

__all__ = [
    "CartItem",
    "CheckoutRequest",
    "CheckoutResult",
    "CollectionFilter",
    "DiscountValidation",
    "PageFilter",
    "ProductFilter",
    "RenderContext",
    "RenderResult",
    "RouteData",
]
