"""Request ID middleware.

Each request carries an id in state["request_id"] (read by the access log)
and in the response header configured by REQUEST_ID_HEADER. A client value is
reused only when it is short and made of [A-Za-z0-9_-]; anything else is
replaced with a fresh UUID4 so it can be logged verbatim.
"""

import re
import uuid
from typing import Callable

from starlette.datastructures import Headers, MutableHeaders

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


def sanitize_request_id(raw: str | None) -> str:
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(Headers(scope=scope).get(header_name))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[header_name] = request_id
            await send(message)

        await app(scope, receive, send_with_request_id)

    return asgi_app
