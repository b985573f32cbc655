"""Per-request trace id.

Reuses an inbound ``X-Trace-Id`` header or mints a new one, echoes it on the
response, and binds it into structlog's contextvars so every line logged
while serving the request carries it. Error responses built outside the
request cycle read it through ``get_trace_id()``.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid4())
        request.state.trace_id = trace_id
        token = trace_id_context.set(trace_id)
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
        finally:
            trace_id_context.reset(token)
            structlog.contextvars.unbind_contextvars("trace_id")
        response.headers[TRACE_HEADER] = trace_id
        return response
