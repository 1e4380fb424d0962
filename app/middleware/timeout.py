"""Per-request deadline (REQUEST_TIMEOUT_SECONDS).

A handler that overruns is cancelled. If it had not started its response
the client gets a 504 JSON body in the same shape as the domain errors;
otherwise the connection is simply left to close.
"""

import asyncio
import logging
from typing import Callable

from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def tracking_send(message: dict) -> None:
            nonlocal started
            started = started or message["type"] == "http.response.start"
            await send(message)

        try:
            await asyncio.wait_for(
                app(scope, receive, tracking_send), timeout=timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                "%s %s cancelled after %ss (response started: %s)",
                scope.get("method"),
                scope.get("path"),
                timeout_seconds,
                started,
            )
            if started:
                return
            response = JSONResponse(
                status_code=504,
                content={
                    "error": "GATEWAY_TIMEOUT",
                    "message": "request took too long",
                    "details": {"timeout_seconds": timeout_seconds},
                },
            )
            await response(scope, receive, send)

    return asgi_app
