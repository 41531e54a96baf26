"""Tenant registry reads (platform schema)."""

from sqlalchemy import select

from storefront.domain.entities.tenant import Tenant
from storefront.domain.enums import TenantStatus
from storefront.infrastructure.persistence.models.platform import (
    DomainMappingModel,
    TenantModel,
)
from storefront.infrastructure.persistence.repositories.base import BaseRepository


def _tenant_to_entity(t: TenantModel) -> Tenant:
    return Tenant(
        id=str(t.id),
        tenant_id=t.tenant_id,
        name=t.name,
        status=t.status,
        custom_domain=t.custom_domain,
    )


class TenantRepository(BaseRepository):
    async def get_active_by_host(self, host: str) -> Tenant | None:
        """Active tenant owning a verified mapping for host, or None."""
        stmt = (
            select(TenantModel)
            .join(DomainMappingModel, DomainMappingModel.tenant_id == TenantModel.tenant_id)
            .where(
                DomainMappingModel.domain == host,
                DomainMappingModel.verified.is_(True),
                TenantModel.status == TenantStatus.ACTIVE.value,
            )
            .limit(1)
        )
        async with self._translate_errors("tenant lookup"):
            async with self.db.session() as session:
                row = (await session.execute(stmt)).scalar_one_or_none()
        return _tenant_to_entity(row) if row else None
