"""Theme object storage: protocol, backends and factory."""

from storefront.infrastructure.external.storage.factory import StorageFactory
from storefront.infrastructure.external.storage.protocol import StorageProtocol

__all__ = ["StorageFactory", "StorageProtocol"]
