"""Trace id middleware.

Assigns every HTTP request a trace id: the caller's X-Trace-Id header
when it is a safe token, otherwise a fresh UUID. The id is stored on
the request state and in a context variable for logging, and echoed
back on the response.
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

TRACE_HEADER = "X-Trace-Id"
NO_TRACE = "-"

_SAFE_TRACE_ID = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

current_trace_id: ContextVar[str] = ContextVar("current_trace_id", default=NO_TRACE)


def new_trace_id() -> str:
    return uuid.uuid4().hex


def resolve_trace_id(incoming: str | None) -> str:
    """Keep a well-formed incoming id, otherwise generate one."""
    if incoming and _SAFE_TRACE_ID.match(incoming):
        return incoming
    return new_trace_id()


def get_trace_id(request: Request) -> str:
    """Return the trace id assigned to ``request``.

    Falls back to a fresh id when the middleware did not run.
    """
    trace_id = getattr(request.state, "trace_id", None)
    return trace_id or new_trace_id()


class TraceIdMiddleware:
    """Pure ASGI middleware; must wrap the error handlers."""

    def __init__(self, app: ASGIApp, header_name: str = TRACE_HEADER) -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        header_key = self.header_name.lower().encode("latin-1")
        incoming = None
        for key, value in scope.get("headers") or []:
            if key.lower() == header_key:
                incoming = value.decode("latin-1")
                break

        trace_id = resolve_trace_id(incoming)
        scope.setdefault("state", {})["trace_id"] = trace_id
        token = current_trace_id.set(trace_id)

        async def send_with_trace(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers") or [])
                headers.append((self.header_name.encode("latin-1"), trace_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        try:
            await self.app(scope, receive, send_with_trace)
        finally:
            current_trace_id.reset(token)
