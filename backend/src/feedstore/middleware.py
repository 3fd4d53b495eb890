"""Request time limit for the HTTP surface."""

import logging

import anyio
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from feedstore.models import ResponseModel

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    """ASGI middleware that cancels HTTP requests running longer than *timeout*.

    Returns HTTP 504 when the limit is hit before the response has started.
    A response that already started is cut short and only logged. Blocking
    work already handed to the threadpool is not interrupted and runs to the end.
    """

    def __init__(self, app: ASGIApp, timeout: float):
        self.app = app
        self.timeout = timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        with anyio.move_on_after(self.timeout) as cancel_scope:
            await self.app(scope, receive, send_wrapper)

        if not cancel_scope.cancelled_caught:
            return
        logger.warning(
            "%s %s timed out after %.1fs", scope["method"], scope["path"], self.timeout
        )
        if started:
            return
        response = JSONResponse(
            status_code=504,
            content=ResponseModel(
                status=False, status_code=504, msg="Request timed out"
            ).model_dump(),
        )
        await response(scope, receive, send)
