"""Platform registry models (schema "platform"): tenants and their domains."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.domain.enums import TenantStatus
from storefront.infrastructure.persistence.database import PLATFORM_SCHEMA, Base


class TenantModel(Base):
    """Registered tenant. tenant_id is the stable identifier used in schema names."""

    __tablename__ = "tenants"
    __table_args__ = {"schema": PLATFORM_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    custom_domain: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=TenantStatus.ACTIVE.value
    )


class DomainMappingModel(Base):
    """Hostname owned by a tenant. Only verified mappings route traffic."""

    __tablename__ = "domain_mapping"
    __table_args__ = {"schema": PLATFORM_SCHEMA}

    domain: Mapped[str] = mapped_column(String, primary_key=True)
    tenant_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
