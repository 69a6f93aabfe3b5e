"""HTTP middleware: timeout, request ID, security headers.

Applied in main app; order matters (first added = outermost).
"""

from app.middleware.request_id import (
    RequestIDMiddleware,
    RequestIdLogFilter,
    get_request_id,
)
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestIdLogFilter",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
    "get_request_id",
]
