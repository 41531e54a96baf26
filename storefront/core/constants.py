"""Core constants: cache key prefixes, theme template names, route patterns.

Cache key prefixes are shared with other services that populate or purge
the renderer's cache; do not rename them.
"""

import re

# Cache key prefixes
CACHE_PREFIX_TENANT_HOST = "tenant:host"
CACHE_PREFIX_THEME = "theme"
CACHE_PREFIX_PRODUCTS = "products"
CACHE_PREFIX_COLLECTIONS = "collections"
CACHE_PREFIX_PAGES = "pages"
CACHE_PREFIX_SERVICE_PRODUCTS = "storefront:products"
CACHE_PREFIX_SERVICE_PRODUCT = "storefront:product"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Template names fetched from object storage for every theme
THEME_TEMPLATE_NAMES: tuple[str, ...] = (
    "index",
    "product",
    "collection",
    "page",
    "cart",
    "search",
    "layout",
)
LAYOUT_TEMPLATE = "layout"

# Theme row role used by the storefront
MAIN_THEME_ROLE = "main"

# Handles: lowercase letters, digits, hyphens
HANDLE_PATTERN = r"[a-z0-9-]+"
PRODUCT_PATH_RE = re.compile(rf"^/products/({HANDLE_PATTERN})$")
COLLECTION_PATH_RE = re.compile(rf"^/collections/({HANDLE_PATTERN})$")
PAGE_PATH_RE = re.compile(rf"^/pages/({HANDLE_PATTERN})$")

# Catalog listing defaults
DEFAULT_LISTING_LIMIT = 20
DEFAULT_LISTING_OFFSET = 0
HOME_COLLECTIONS_LIMIT = 3
HOME_FEATURED_PRODUCTS_LIMIT = 8
FEATURED_TAG = "featured"
