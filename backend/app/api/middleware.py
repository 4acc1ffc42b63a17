"""Request Middleware — time limit and access logging for every HTTP request.

Invariants:
    - A request that runs past timeout_seconds is cancelled and answered with 504,
      unless the response already started (then the connection is just closed)
    - Exactly one access log line per request (method, path, status, duration),
      including timeouts and unhandled errors (logged as 500)

Design Decisions:
    - Plain ASGI class over @app.middleware("http"): wait_for cancels the wrapped app
      directly, no background task keeps running after the 504 is sent
    - Domain exception handlers sit inside this layer, so the 504 envelope is built here
"""

import asyncio
import logging
import time

from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from app.core.errors import RequestTimeoutError

logger = logging.getLogger(__name__)


class RequestTimeoutMiddleware:
    def __init__(self, app: ASGIApp, timeout_seconds: float = 30.0):
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        started = time.perf_counter()
        status_code: int | None = None

        async def send_tracking(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await asyncio.wait_for(
                self.app(scope, receive, send_tracking),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            exc = RequestTimeoutError(self.timeout_seconds)
            logger.error(
                exc.message,
                extra={"error_code": exc.code, "path": scope["path"]},
            )
            if status_code is not None:
                raise
            response = JSONResponse(
                status_code=exc.http_status, content=exc.to_response(),
            )
            await response(scope, receive, send_tracking)
        except Exception:
            # ServerErrorMiddleware (outside this layer) answers with 500
            if status_code is None:
                status_code = 500
            raise
        finally:
            logger.info(
                f"{scope['method']} {scope['path']} {status_code}",
                extra={
                    "method": scope["method"],
                    "path": scope["path"],
                    "status_code": status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                },
            )
