"""Cross-Origin Isolation — COOP/COEP headers injected into every response.

Invariants:
    - Every http.response.start passing through carries both headers, whatever
      the route or status
    - Existing values are overwritten, never duplicated

Design Decisions:
    - Pure ASGI middleware over @app.middleware("http"): no response body
      buffering, static file streaming untouched
"""

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

ISOLATION_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Embedder-Policy": "require-corp",
}


def apply_isolation_headers(headers: MutableHeaders) -> None:
    for name, value in ISOLATION_HEADERS.items():
        headers[name] = value


class CrossOriginIsolationMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_isolation(message: Message) -> None:
            if message["type"] == "http.response.start":
                apply_isolation_headers(MutableHeaders(scope=message))
            await send(message)

        await self.app(scope, receive, send_with_isolation)
