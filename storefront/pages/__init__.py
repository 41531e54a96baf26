"""Static HTML pages served outside tenant themes."""

from storefront.pages.cart import render_cart_page
from storefront.pages.preview import render_preview_page
from storefront.pages.store_not_found import render_store_not_found_page

__all__ = ["render_cart_page", "render_preview_page", "render_store_not_found_page"]
