"""
ASGI wrapper that counts requests before handing them to the wrapped app.
"""

from starlette.types import ASGIApp, Receive, Scope, Send

from chirpy_app.metrics.hit_counter import HitCounter


class HitCountingMiddleware:
    """
    Wrap an ASGI app (the static file server) and count every HTTP request.

    The counter is passed in explicitly; it belongs to the ApiConfig that
    create_app() builds.

    Usage:
        app.mount("/app", HitCountingMiddleware(StaticFiles(...), counter))
    """

    def __init__(self, app: ASGIApp, counter: HitCounter):
        self.app = app
        self.counter = counter

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            self.counter.increment()
        await self.app(scope, receive, send)
