"""ASGI middleware enforcing a request body size limit."""

from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


def _too_large_response() -> JSONResponse:
    return JSONResponse(status_code=413, content={"error": "request body too large"})


def _declared_length(scope: Scope) -> int | None:
    """Return the Content-Length header value, or None when absent.

    An unparseable header yields -1 so callers treat it as oversized.
    """
    for header, value in scope.get("headers", []):
        if header == b"content-length":
            try:
                return int(value)
            except ValueError:
                return -1
    return None


class MaxBodySizeMiddleware:
    """Reject requests whose body exceeds ``max_body_size`` bytes.

    The declared Content-Length is checked up front. The body is then read
    in full before the app runs, so chunked uploads are rejected with 413
    as soon as they pass the limit; buffered messages are replayed to the
    app afterwards.
    """

    def __init__(self, app: ASGIApp, max_body_size: int) -> None:
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = _declared_length(scope)
        if declared is not None and (declared < 0 or declared > self.max_body_size):
            await _too_large_response()(scope, receive, send)
            return

        buffered: list[Message] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            buffered.append(message)
            if message["type"] != "http.request":
                break
            received += len(message.get("body", b""))
            if received > self.max_body_size:
                await _too_large_response()(scope, receive, send)
                return
            more_body = message.get("more_body", False)

        async def replay_receive() -> Message:
            if buffered:
                return buffered.pop(0)
            return await receive()

        await self.app(scope, replay_receive, send)
