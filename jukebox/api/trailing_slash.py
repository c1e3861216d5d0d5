"""Trailing Slash Handling — "/playlists/" routes exactly like "/playlists".

Invariants:
    - Only HTTP scopes are touched; "/" itself is left alone
    - The path is rewritten in place of a redirect, so clients never see a 307

Design Decisions:
    - Pure ASGI middleware rather than a duplicate route per path: one rule covers
      every router, including the catch-all 404
"""

from starlette.types import ASGIApp, Receive, Scope, Send


class StripTrailingSlashMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            path = scope["path"]
            if len(path) > 1 and path.endswith("/"):
                scope = dict(scope)
                scope["path"] = path.rstrip("/") or "/"
                raw_path = scope.get("raw_path")
                if raw_path:
                    scope["raw_path"] = raw_path.rstrip(b"/") or b"/"
        await self.app(scope, receive, send)
