"""
Centralized error handlers for FastAPI.

Maps domain failures, request parsing errors and unexpected exceptions
to problem responses through a single ErrorMapper.
Internal details reach clients only when the mapper reveals them.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from onlinestore.domain.errors import BadRequestError, StoreError
from onlinestore.shared.errors.mapper import ErrorMapper
from onlinestore.shared.errors.schemas import PROBLEM_MEDIA_TYPE
from onlinestore.shared.tracing import get_trace_id

MAX_REPORTED_PARSE_ERRORS = 5


def problem_response(mapper: ErrorMapper, request: Request, failure: BaseException) -> JSONResponse:
    """Map ``failure`` and render it as an application/problem+json response."""
    status_code, error = mapper.map(failure, get_trace_id(request), request.url.path)
    return JSONResponse(
        status_code=status_code,
        content=error.to_body(),
        media_type=PROBLEM_MEDIA_TYPE,
    )


def describe_parse_errors(exc: RequestValidationError) -> str:
    """Summarize request parsing errors as one human-readable sentence."""
    parts = []
    for error in exc.errors()[:MAX_REPORTED_PARSE_ERRORS]:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    summary = "; ".join(parts) or "malformed request"
    return f"The request could not be parsed ({summary})."


class UnhandledErrorMiddleware:
    """Pure ASGI catch-all for exceptions no handler claimed.

    Installed innermost among the user middleware, so the problem
    response still passes through the trace id and security header
    middleware, and the failure is logged while the request trace id
    is current. Exceptions raised after the response has started are
    re-raised to the server.
    """

    def __init__(self, app: ASGIApp, mapper: ErrorMapper) -> None:
        self.app = app
        self.mapper = mapper

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception as exc:
            if response_started:
                raise
            response = problem_response(self.mapper, Request(scope), exc)
            await response(scope, receive, send)


def register_error_handlers(app: FastAPI, mapper: ErrorMapper) -> None:
    """Register all failure handlers on the FastAPI application.

    Known failures are handled by exception handlers; anything else is
    caught by UnhandledErrorMiddleware, which must be added before the
    trace id and security header middleware.

    Args:
        app: The FastAPI application instance.
        mapper: Mapper translating failures into problem responses.
    """

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
        """Handle the known failure kinds raised by use cases."""
        return problem_response(mapper, request, exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_parse_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Body or parameters that cannot be parsed are bad requests."""
        return problem_response(mapper, request, BadRequestError(describe_parse_errors(exc)))

    app.add_middleware(UnhandledErrorMiddleware, mapper=mapper)
