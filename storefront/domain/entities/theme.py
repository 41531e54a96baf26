"""Theme domain entity: a versioned bundle of templates and settings."""

from dataclasses import dataclass, field
from typing import Any

from storefront.core.constants import LAYOUT_TEMPLATE


@dataclass(frozen=True)
class Theme:
    """Tenant theme with template sources keyed by template name.

    templates only contains names that exist in object storage; a missing
    file is simply absent from the mapping.
    """

    id: str
    name: str
    version: str
    s3_key: str
    settings: dict[str, Any] = field(default_factory=dict)
    templates: dict[str, str] = field(default_factory=dict)

    def get_template(self, name: str) -> str | None:
        """Return template source or None if the theme does not define it."""
        return self.templates.get(name)

    @property
    def layout(self) -> str | None:
        return self.templates.get(LAYOUT_TEMPLATE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "version": self.version,
            "s3_key": self.s3_key,
            "settings": dict(self.settings),
            "templates": dict(self.templates),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Theme":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            version=str(data["version"]),
            s3_key=data["s3_key"],
            settings=data.get("settings") or {},
            templates=data.get("templates") or {},
        )
