"""Domain exceptions for the storefront renderer.

Four failure kinds flow through the pipeline:

- NotFound: tenant, theme, route or template absent. Never retried.
- Unavailable: cache, database or object storage unreachable. Propagated,
  since resolution correctness depends on these.
- RemoteServiceError: a platform microservice failed. Listings degrade to
  empty results before this is raised; checkout and discount calls surface it.
- Validation: malformed checkout/discount input.

The presentation layer maps error_code to an HTTP status in
storefront.core.exception_handlers.
"""

from typing import Any


class StorefrontException(Exception):
    """Base exception for all storefront renderer errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. host, handle, service).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundException(StorefrontException):
    """Base for lookups that resolved to nothing (tenant, theme, route, template)."""


class TenantNotFoundError(NotFoundException):
    """No active tenant with a verified domain mapping for the host."""

    def __init__(self, host: str) -> None:
        super().__init__(
            f"Store not found for host: {host}",
            "TENANT_NOT_FOUND",
            {"host": host},
        )


class ThemeNotFoundError(NotFoundException):
    """Tenant has no main theme configured."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(
            "Theme not configured",
            "THEME_NOT_FOUND",
            {"tenant_id": tenant_id},
        )


class RouteNotFoundError(NotFoundException):
    """Path matches no route, or the matched handle has no entity."""

    def __init__(
        self, path: str, resource: str | None = None, handle: str | None = None
    ) -> None:
        details: dict[str, Any] = {"path": path}
        if resource:
            details["resource"] = resource
        if handle:
            details["handle"] = handle
        message = f"{resource.capitalize()} not found" if resource else "Page not found"
        super().__init__(message, "ROUTE_NOT_FOUND", details)


class TemplateNotFoundError(NotFoundException):
    """Theme has no template with the requested name."""

    def __init__(self, template: str) -> None:
        super().__init__(
            f"Template {template} not found",
            "TEMPLATE_NOT_FOUND",
            {"template": template},
        )


class ServiceUnavailableError(StorefrontException):
    """A backing store (cache, database, object storage) is unreachable."""

    def __init__(self, dependency: str, reason: str | None = None) -> None:
        details: dict[str, Any] = {"dependency": dependency}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"{dependency} unavailable",
            "SERVICE_UNAVAILABLE",
            details,
        )


class RemoteServiceError(StorefrontException):
    """A platform microservice call failed (transport error or non-2xx)."""

    def __init__(
        self, service: str, reason: str, status_code: int | None = None
    ) -> None:
        details: dict[str, Any] = {"service": service, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"{service} request failed",
            "REMOTE_SERVICE_ERROR",
            details,
        )


class ValidationException(StorefrontException):
    """Raised when request input fails business validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class TemplateRenderError(StorefrontException):
    """Theme template failed to compile or render."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(
            f"Template {template} failed to render",
            "TEMPLATE_RENDER_ERROR",
            {"template": template, "reason": reason},
        )


class InvalidTenantIdError(StorefrontException):
    """Registry tenant id cannot name a tenant schema (outside [a-z0-9_])."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(
            "Tenant is misconfigured",
            "INVALID_TENANT_ID",
            {"tenant_id": tenant_id},
        )
