"""Security headers middleware.

Storefront pages run merchant themes that pull images, fonts and scripts
from arbitrary HTTPS origins and embed YouTube / Vimeo players, so the CSP
restricts schemes and framing rather than origins. frame_ancestors lets the
merchant dashboard frame /preview.
"""

from typing import Callable

THEME_CSP = (
    "default-src 'self' https:; "
    "img-src 'self' https: data:; "
    "style-src 'self' https: 'unsafe-inline'; "
    "script-src 'self' https: 'unsafe-inline'; "
    "frame-src https://www.youtube.com https://player.vimeo.com; "
    "object-src 'none'; "
    "base-uri 'self'"
)

DEFAULT_HEADERS = {
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


def build_security_headers(frame_ancestors: str = "'self'") -> dict[str, str]:
    headers = dict(DEFAULT_HEADERS)
    headers["Content-Security-Policy"] = f"{THEME_CSP}; frame-ancestors {frame_ancestors}"
    return headers


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on all responses unless the handler already set them. Raw ASGI."""
    resolved = headers if headers is not None else build_security_headers()
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in header_list if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
