"""Security headers middleware.

Adds security response headers. API responses get a locked-down CSP and are
never cached (search results can name deceased persons); HTML pages get a
CSP that permits their inline styles and scripts. Raw ASGI.
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cache-Control": "no-store",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}

PAGE_CSP = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; "
    "script-src 'self' 'unsafe-inline'; img-src 'self' data:; frame-ancestors 'none'"
)

# Interactive docs load their assets from a CDN; leave their CSP to FastAPI.
_DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


def _headers_for(path: str, api_headers: dict[str, str]) -> list[tuple[bytes, bytes]]:
    resolved = dict(api_headers)
    if path.startswith(_DOCS_PATHS):
        resolved.pop("Content-Security-Policy", None)
    elif not path.startswith("/api/"):
        resolved["Content-Security-Policy"] = PAGE_CSP
        resolved.pop("Cache-Control", None)
    return [(k.lower().encode(), v.encode()) for k, v in resolved.items()]


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on all HTTP responses. Raw ASGI."""
    api_headers = headers if headers is not None else API_HEADERS

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = _headers_for(scope.get("path", ""), api_headers)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                seen = {h[0].lower() for h in headers}
                headers.extend(h for h in extra if h[0] not in seen)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
