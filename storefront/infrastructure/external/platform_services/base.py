"""Shared request helper for platform microservice clients.

All clients share one httpx.AsyncClient (built in the lifespan) and pass a
per-call timeout, so each service keeps its own latency budget.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.core.metrics import REMOTE_CALLS
from storefront.domain.exceptions import RemoteServiceError

logger = logging.getLogger(__name__)


class ServiceClient:
    """Base for clients of one platform microservice.

    Args:
        http: Shared async HTTP client.
        base_url: Service root (e.g. http://products-service.platform-services.svc.cluster.local).
        timeout: Per-request timeout in seconds.
    """

    service_name = "platform-service"

    def __init__(self, http: httpx.AsyncClient, base_url: str, timeout: float) -> None:
        self._http = http
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """Send a request and return the 2xx response.

        Raises:
            RemoteServiceError: Transport failure, timeout or non-2xx status
                (status_code is set for HTTP errors).
        """
        url = f"{self.base_url}{path}"
        try:
            resp = await self._http.request(method, url, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException as e:
            REMOTE_CALLS.labels(service=self.service_name, outcome="timeout").inc()
            raise RemoteServiceError(self.service_name, f"timeout after {self.timeout}s") from e
        except httpx.HTTPError as e:
            REMOTE_CALLS.labels(service=self.service_name, outcome="error").inc()
            raise RemoteServiceError(self.service_name, str(e)) from e
        if resp.is_error:
            REMOTE_CALLS.labels(service=self.service_name, outcome="error").inc()
            raise RemoteServiceError(
                self.service_name,
                f"HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        REMOTE_CALLS.labels(service=self.service_name, outcome="ok").inc()
        return resp

    async def _json(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        resp = await self._request(method, path, **kwargs)
        try:
            data = resp.json()
        except ValueError as e:
            raise RemoteServiceError(self.service_name, "invalid JSON response") from e
        if not isinstance(data, dict):
            raise RemoteServiceError(self.service_name, "unexpected response shape")
        return data
