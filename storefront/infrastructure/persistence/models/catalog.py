"""Catalog models (tenant schema): products, variants, collections, pages."""

from datetime import datetime

from sqlalchemy import (
    ARRAY,
    JSON,
    BigInteger,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.infrastructure.persistence.database import TENANT_SCHEMA, Base


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = {"schema": TENANT_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    handle: Mapped[str] = mapped_column(String, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    vendor: Mapped[str | None] = mapped_column(String, nullable=True)
    product_type: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str] = mapped_column(String, nullable=False, index=True)
    tags: Mapped[list[str] | None] = mapped_column(ARRAY(String), nullable=True)
    images: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    variants: Mapped[list["ProductVariantModel"]] = relationship(
        back_populates="product",
        order_by="ProductVariantModel.position",
        lazy="raise",
    )


class ProductVariantModel(Base):
    """Variant prices are stored in minor units (cents)."""

    __tablename__ = "product_variants"
    __table_args__ = {"schema": TENANT_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    product_id: Mapped[str] = mapped_column(
        ForeignKey(f"{TENANT_SCHEMA}.products.id"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String, nullable=False)
    sku: Mapped[str | None] = mapped_column(String, nullable=True)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    compare_at_price: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    inventory_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    product: Mapped[ProductModel] = relationship(back_populates="variants")


class CollectionModel(Base):
    __tablename__ = "collections"
    __table_args__ = {"schema": TENANT_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    handle: Mapped[str] = mapped_column(String, nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class CollectionProductModel(Base):
    """Collection membership (many-to-many)."""

    __tablename__ = "collection_products"
    __table_args__ = {"schema": TENANT_SCHEMA}

    collection_id: Mapped[str] = mapped_column(
        ForeignKey(f"{TENANT_SCHEMA}.collections.id"), primary_key=True
    )
    product_id: Mapped[str] = mapped_column(
        ForeignKey(f"{TENANT_SCHEMA}.products.id"), primary_key=True
    )


class PageModel(Base):
    """Page-builder page. content is the JSON block list."""

    __tablename__ = "pages"
    __table_args__ = {"schema": TENANT_SCHEMA}

    id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    handle: Mapped[str] = mapped_column(String, nullable=False, index=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
