"""Tests for tenant schema naming and repository error translation."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from storefront.application.dtos.catalog import CollectionFilter, PageFilter, ProductFilter
from storefront.core.config import Settings
from storefront.domain.exceptions import InvalidTenantIdError, ServiceUnavailableError
from storefront.infrastructure.persistence.database import Database, is_valid_tenant_id
from storefront.infrastructure.persistence.repositories.catalog_repo import CatalogRepository
from storefront.infrastructure.persistence.repositories.theme_repo import ThemeRepository


@pytest.fixture
def db(settings: Settings) -> Database:
    return Database(settings, engine=MagicMock())


def test_tenant_schema_uses_prefix(db: Database) -> None:
    assert db.tenant_schema("acme_2") == "tenant_acme_2"


@pytest.mark.parametrize("tenant_id", ["Acme", "acme-shop", "acme;drop", "", "a" * 49])
def test_tenant_schema_rejects_unsafe_ids(db: Database, tenant_id: str) -> None:
    assert not is_valid_tenant_id(tenant_id)
    with pytest.raises(InvalidTenantIdError) as exc_info:
        db.tenant_schema(tenant_id)
    assert exc_info.value.error_code == "INVALID_TENANT_ID"
    assert exc_info.value.details == {"tenant_id": tenant_id}


async def test_repository_surfaces_invalid_tenant_id_as_domain_error(db: Database) -> None:
    with pytest.raises(InvalidTenantIdError):
        await ThemeRepository(db).get_main_theme("Acme")
    db.engine.execution_options.assert_not_called()


async def test_repository_translates_driver_errors(db: Database) -> None:
    db.engine.execution_options.side_effect = OperationalError("SELECT 1", {}, OSError("refused"))
    with pytest.raises(ServiceUnavailableError) as exc_info:
        await ThemeRepository(db).get_main_theme("acme")
    assert exc_info.value.details["dependency"] == "database"
    assert exc_info.value.details["reason"].startswith("theme lookup: ")


@pytest.mark.parametrize(
    ("method", "query", "operation"),
    [
        ("list_products", ProductFilter(handle="red-hat"), "product listing"),
        ("list_collections", CollectionFilter(limit=3), "collection listing"),
        ("list_pages", PageFilter(handle="about"), "page listing"),
    ],
)
async def test_catalog_listings_translate_driver_errors(
    db: Database, method: str, query: object, operation: str
) -> None:
    db.engine.execution_options.side_effect = OperationalError("SELECT 1", {}, OSError("refused"))
    with pytest.raises(ServiceUnavailableError) as exc_info:
        await getattr(CatalogRepository(db), method)("acme", query)
    assert exc_info.value.details["reason"].startswith(f"{operation}: ")
