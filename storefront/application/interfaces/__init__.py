"""Application ports: repository and service protocols."""

from storefront.application.interfaces.repositories import (
    ICatalogRepository,
    ITenantRepository,
    IThemeRepository,
)
from storefront.application.interfaces.services import ICatalogProvider, ICdnPurger

__all__ = [
    "ICatalogProvider",
    "ICatalogRepository",
    "ICdnPurger",
    "ITenantRepository",
    "IThemeRepository",
]
