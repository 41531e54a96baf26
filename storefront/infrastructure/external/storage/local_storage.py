"""Local filesystem theme storage (development and single-node deployments)."""

from __future__ import annotations

from pathlib import Path

import aiofiles
import aiofiles.os

from storefront.infrastructure.exceptions import (
    StorageNotFoundError,
    StoragePermissionError,
    StorageReadError,
)


class LocalStorageService:
    """Reads theme objects from a directory tree mirroring the bucket layout.

    Object key "themes/acme/v3/templates/index.liquid" maps to
    {storage_root}/themes/acme/v3/templates/index.liquid. Keys are validated
    against storage_root.
    """

    def __init__(self, storage_root: str) -> None:
        self.storage_root = Path(storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True, mode=0o750)

    def _get_full_path(self, key: str) -> Path:
        """Resolve and validate path under storage_root."""
        full_path = (self.storage_root / key).resolve()
        try:
            full_path.relative_to(self.storage_root)
        except ValueError as e:
            raise StoragePermissionError(key) from e
        return full_path

    async def read_text(self, key: str, encoding: str = "utf-8") -> str:
        path = self._get_full_path(key)
        try:
            async with aiofiles.open(path, "r", encoding=encoding) as f:
                return await f.read()
        except FileNotFoundError as e:
            raise StorageNotFoundError(key) from e
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(key, str(e)) from e

    async def exists(self, key: str) -> bool:
        return await aiofiles.os.path.isfile(self._get_full_path(key))
