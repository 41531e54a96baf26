"""Theme metadata reads (tenant schema)."""

from sqlalchemy import select

from storefront.core.constants import MAIN_THEME_ROLE
from storefront.domain.entities.theme import Theme
from storefront.infrastructure.persistence.models.theme import ThemeModel
from storefront.infrastructure.persistence.repositories.base import BaseRepository


class ThemeRepository(BaseRepository):
    async def get_main_theme(self, tenant_id: str) -> Theme | None:
        """Main theme of a tenant without templates (those come from storage)."""
        stmt = (
            select(ThemeModel)
            .where(ThemeModel.role == MAIN_THEME_ROLE)
            .limit(1)
        )
        async with self._translate_errors("theme lookup"):
            async with self.db.tenant_session(tenant_id) as session:
                row = (await session.execute(stmt)).scalar_one_or_none()
        if row is None:
            return None
        return Theme(
            id=str(row.id),
            name=row.name,
            version=str(row.version),
            s3_key=row.s3_key.rstrip("/"),
            settings=row.settings or {},
        )
