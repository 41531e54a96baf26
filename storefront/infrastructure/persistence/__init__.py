"""Persistence: engine/session management, ORM models and repositories."""

from storefront.infrastructure.persistence.database import Base, Database

__all__ = ["Base", "Database"]
