"""Request timeout middleware (raw ASGI).

Paths under an exempt prefix are never cut off: the fan-out trigger walks
every coffeeshop and its duration grows with the number of tenants.
"""

import asyncio
import json
import logging
from typing import Callable, Iterable

logger = logging.getLogger(__name__)


def _timeout_body(timeout_seconds: int) -> bytes:
    return json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": f"Request timed out after {timeout_seconds} seconds",
            "details": {"timeout_seconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(
    app: Callable,
    timeout_seconds: int,
    exempt_prefixes: Iterable[str] = (),
) -> Callable:
    """Answer 504 when a request outlives timeout_seconds."""
    exempt = tuple(exempt_prefixes)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        path = scope.get("path", "")
        if scope["type"] != "http" or (exempt and path.startswith(exempt)):
            await app(scope, receive, send)
            return

        started = False

        async def send_tracking(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, send_tracking), float(timeout_seconds))
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %ss: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                path,
            )
            if started:
                # Headers already went out; nothing valid left to send.
                return
            await send(
                {
                    "type": "http.response.start",
                    "status": 504,
                    "headers": [(b"content-type", b"application/json")],
                }
            )
            await send({"type": "http.response.body", "body": _timeout_body(timeout_seconds)})

    return asgi_app
