"""HTTP clients for platform microservices (products, checkout, discounts, analytics)."""

from storefront.infrastructure.external.platform_services.analytics import AnalyticsClient
from storefront.infrastructure.external.platform_services.checkout import CheckoutServiceClient
from storefront.infrastructure.external.platform_services.discounts import DiscountsServiceClient
from storefront.infrastructure.external.platform_services.products import ProductsServiceClient

__all__ = [
    "AnalyticsClient",
    "CheckoutServiceClient",
    "DiscountsServiceClient",
    "ProductsServiceClient",
]
