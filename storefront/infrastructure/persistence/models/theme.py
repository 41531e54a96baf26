"""Tenant theme model (tenant schema)."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.infrastructure.persistence.database import TENANT_SCHEMA, Base


class ThemeModel(Base):
    """Theme metadata. Template files live in object storage under s3_key."""

    __tablename__ = "themes"
    __table_args__ = {"schema": TENANT_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    version: Mapped[str] = mapped_column(String, nullable=False)
    s3_key: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, nullable=False, index=True)
    settings: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
