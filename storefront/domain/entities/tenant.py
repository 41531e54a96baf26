"""Tenant domain entity (read-only copy of the platform registry row)."""

from dataclasses import asdict, dataclass
from typing import Any

from storefront.domain.enums import TenantStatus


@dataclass(frozen=True)
class Tenant:
    """A storefront tenant resolved from a hostname.

    id is the registry row id; tenant_id is the stable tenant identifier used
    for schema names, cache keys and response headers.
    """

    id: str
    tenant_id: str
    name: str
    status: str = TenantStatus.ACTIVE.value
    custom_domain: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE.value

    def shop_url(self, default_shop_domain: str) -> str:
        """Public storefront URL: custom domain, else {tenant_id}.{default_shop_domain}."""
        domain = self.custom_domain or f"{self.tenant_id}.{default_shop_domain}"
        return f"https://{domain}"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Tenant":
        return cls(
            id=str(data["id"]),
            tenant_id=str(data["tenant_id"]),
            name=data["name"],
            status=data.get("status", TenantStatus.ACTIVE.value),
            custom_domain=data.get("custom_domain"),
        )
