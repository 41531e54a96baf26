"""Object storage protocol for theme template files.

Implementations: LocalStorageService (directory tree), S3StorageService.
"""

from typing import Protocol


class StorageProtocol(Protocol):
    """Read-only access to theme assets by object key."""

    async def read_text(self, key: str, encoding: str = "utf-8") -> str:
        """Return the object's content as text.

        Raises:
            StorageNotFoundError: No object at key.
            StorageReadError: Any other storage failure.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Return True if an object exists at key."""
        ...
