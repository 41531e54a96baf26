"""HTTP middleware: timeout, request size limit, request ID, security headers.

Applied in create_app; order matters (last added = outermost).
"""

from storefront.middleware.request_id import RequestIDMiddleware
from storefront.middleware.request_size_limit import RequestSizeLimitMiddleware
from storefront.middleware.security_headers import (
    SecurityHeadersMiddleware,
    build_security_headers,
)
from storefront.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
    "build_security_headers",
]
