"""Base repository: shared Database handle and error translation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError

from storefront.domain.exceptions import ServiceUnavailableError
from storefront.infrastructure.persistence.database import Database


class BaseRepository:
    """Read-only repository over the shared Database.

    Driver and connection failures surface as ServiceUnavailableError so the
    API maps them to 503 like cache and storage outages.
    """

    def __init__(self, db: Database) -> None:
        self.db = db

    @asynccontextmanager
    async def _translate_errors(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as e:
            raise ServiceUnavailableError("database", f"{operation}: {e}") from e
