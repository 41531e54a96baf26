"""Catalog query filters.

Field order matters: cache keys serialize the set fields in declaration
order, so reordering fields changes every catalog key.
"""

from dataclasses import dataclass

from storefront.core.constants import DEFAULT_LISTING_LIMIT, DEFAULT_LISTING_OFFSET


@dataclass(frozen=True)
class ProductFilter:
    """Product listing query. Unset (None) fields do not constrain the query."""

    handle: str | None = None
    collection_id: str | None = None
    featured: bool | None = None
    limit: int | None = None
    offset: int | None = None

    @property
    def effective_limit(self) -> int:
        return self.limit if self.limit is not None else DEFAULT_LISTING_LIMIT

    @property
    def effective_offset(self) -> int:
        return self.offset if self.offset is not None else DEFAULT_LISTING_OFFSET


@dataclass(frozen=True)
class CollectionFilter:
    handle: str | None = None
    limit: int | None = None
    offset: int | None = None

    @property
    def effective_limit(self) -> int:
        return self.limit if self.limit is not None else DEFAULT_LISTING_LIMIT

    @property
    def effective_offset(self) -> int:
        return self.offset if self.offset is not None else DEFAULT_LISTING_OFFSET


@dataclass(frozen=True)
class PageFilter:
    handle: str | None = None
    limit: int | None = None
    offset: int | None = None

    @property
    def effective_limit(self) -> int:
        return self.limit if self.limit is not None else DEFAULT_LISTING_LIMIT

    @property
    def effective_offset(self) -> int:
        return self.offset if self.offset is not None else DEFAULT_LISTING_OFFSET
