"""Infrastructure exceptions for object storage.

Storage errors extend StorefrontException so the presentation layer maps
them to HTTP responses like any other failure.
"""

from storefront.domain.exceptions import StorefrontException


class StorageException(StorefrontException):
    """Base exception for storage operations."""


class StorageNotFoundError(StorageException):
    """Object not found in storage. Theme loading treats this as an absent template."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Object not found: {key}",
            "STORAGE_NOT_FOUND",
            {"key": key},
        )


class StorageReadError(StorageException):
    """Object storage unreachable or returned an error other than not-found."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to read object: {key}",
            "STORAGE_UNAVAILABLE",
            {"key": key, "reason": reason},
        )


class StoragePermissionError(StorageException):
    """Key resolves outside the storage root (path traversal)."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Permission denied for {key}",
            "STORAGE_PERMISSION_ERROR",
            {"key": key},
        )
