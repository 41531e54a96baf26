"""Catalog reads (tenant schema): products with variants, collections, pages."""

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.core.constants import FEATURED_TAG
from storefront.domain.entities.catalog import Collection, Page, Product, ProductVariant
from storefront.infrastructure.persistence.models.catalog import (
    CollectionModel,
    CollectionProductModel,
    PageModel,
    ProductModel,
)
from storefront.infrastructure.persistence.repositories.base import BaseRepository


def _product_to_entity(p: ProductModel) -> Product:
    return Product(
        id=str(p.id),
        title=p.title,
        handle=p.handle,
        status=p.status,
        description=p.description,
        vendor=p.vendor,
        product_type=p.product_type,
        tags=list(p.tags or []),
        images=list(p.images or []),
        published_at=p.published_at.isoformat() if p.published_at else None,
        variants=[
            ProductVariant(
                id=str(v.id),
                title=v.title,
                price=int(v.price),
                sku=v.sku,
                compare_at_price=int(v.compare_at_price) if v.compare_at_price is not None else None,
                inventory_quantity=v.inventory_quantity,
            )
            for v in p.variants
        ],
    )


class CatalogRepository(BaseRepository):
    """One statement per listing, newest first."""

    async def list_products(self, tenant_id: str, query: ProductFilter) -> list[Product]:
        """Active products matching query, variants loaded in the same statement."""
        stmt = (
            select(ProductModel)
            .options(joinedload(ProductModel.variants))
            .where(ProductModel.status == "active")
        )
        if query.handle:
            stmt = stmt.where(ProductModel.handle == query.handle)
        if query.collection_id:
            members = select(CollectionProductModel.product_id).where(
                CollectionProductModel.collection_id == query.collection_id
            )
            stmt = stmt.where(ProductModel.id.in_(members))
        if query.featured:
            stmt = stmt.where(ProductModel.tags.any(FEATURED_TAG))
        stmt = (
            stmt.order_by(ProductModel.created_at.desc(), ProductModel.id)
            .limit(query.effective_limit)
            .offset(query.effective_offset)
        )
        async with self._translate_errors("product listing"):
            async with self.db.tenant_session(tenant_id) as session:
                rows = (await session.execute(stmt)).unique().scalars().all()
                return [_product_to_entity(p) for p in rows]

    async def list_collections(
        self, tenant_id: str, query: CollectionFilter
    ) -> list[Collection]:
        """Published collections with their product counts."""
        product_count = (
            select(func.count())
            .select_from(CollectionProductModel)
            .where(CollectionProductModel.collection_id == CollectionModel.id)
            .scalar_subquery()
        )
        stmt = select(CollectionModel, product_count).where(CollectionModel.published.is_(True))
        if query.handle:
            stmt = stmt.where(CollectionModel.handle == query.handle)
        stmt = (
            stmt.order_by(CollectionModel.created_at.desc(), CollectionModel.id)
            .limit(query.effective_limit)
            .offset(query.effective_offset)
        )
        async with self._translate_errors("collection listing"):
            async with self.db.tenant_session(tenant_id) as session:
                rows = (await session.execute(stmt)).all()
        return [
            Collection(
                id=str(c.id),
                title=c.title,
                handle=c.handle,
                description=c.description,
                published=c.published,
                product_count=int(count or 0),
            )
            for c, count in rows
        ]

    async def list_pages(self, tenant_id: str, query: PageFilter) -> list[Page]:
        stmt = select(PageModel).where(PageModel.is_published.is_(True))
        if query.handle:
            stmt = stmt.where(PageModel.handle == query.handle)
        stmt = (
            stmt.order_by(PageModel.created_at.desc(), PageModel.id)
            .limit(query.effective_limit)
            .offset(query.effective_offset)
        )
        async with self._translate_errors("page listing"):
            async with self.db.tenant_session(tenant_id) as session:
                rows = (await session.execute(stmt)).scalars().all()
        return [
            Page(
                id=str(p.id),
                title=p.title,
                handle=p.handle,
                content=p.content or "[]",
                is_published=p.is_published,
            )
            for p in rows
        ]
