"""Security response headers for the JSON API.

Responses from the interactive docs pages (Swagger UI, ReDoc) skip the
Content-Security-Policy header, which would block their scripts.
Raw ASGI, no BaseHTTPMiddleware.
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}
DOCS_PATHS = ("/docs", "/redoc")


def _encode(headers: dict[str, str]) -> list[tuple[bytes, bytes]]:
    return [(k.lower().encode(), v.encode()) for k, v in headers.items()]


def SecurityHeadersMiddleware(app: Callable) -> Callable:
    """Add API_HEADERS to every HTTP response that does not already set them."""
    api_headers = _encode(API_HEADERS)
    docs_headers = [h for h in api_headers if h[0] != b"content-security-policy"]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        path = scope.get("path", "")
        extra = docs_headers if path.startswith(DOCS_PATHS) else api_headers

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in extra if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
