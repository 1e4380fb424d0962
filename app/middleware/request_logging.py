"""Access log middleware.

Logs one line per HTTP request: method, path, status, duration and the
request id set by RequestIDMiddleware (which must wrap this middleware).
Raw ASGI, no BaseHTTPMiddleware.
"""

import logging
import time
from typing import Callable

logger = logging.getLogger("app.access")


def RequestLoggingMiddleware(app: Callable) -> Callable:
    """Log method, path, status and elapsed milliseconds for each request."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s %.1fms request_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                elapsed_ms,
                scope.get("state", {}).get("request_id", "-"),
            )

    return asgi_app
