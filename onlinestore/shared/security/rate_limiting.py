"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-endpoint rate limits, keyed by client
address. Write endpoints carry a stricter limit than reads.
Rejections use the same problem body as every other failure.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from onlinestore.core.config import settings
from onlinestore.shared.errors.schemas import PROBLEM_MEDIA_TYPE, ErrorResponse
from onlinestore.shared.tracing import get_trace_id

logger = logging.getLogger(__name__)

HTTP_429 = 429
TYPE_TOO_MANY_REQUESTS = "https://tools.ietf.org/html/rfc6585#section-4"

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])


def read_rate_limit() -> str:
    return settings.rate_limit_default


def write_rate_limit() -> str:
    """Current limit applied to POST, PUT and DELETE endpoints."""
    return settings.rate_limit_write


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a problem response.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 problem response naming the exceeded limit.
    """
    logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
    error = ErrorResponse(
        type=TYPE_TOO_MANY_REQUESTS,
        title="Too Many Requests",
        status=HTTP_429,
        detail=f"Rate limit exceeded: {exc.detail}",
        instance=request.url.path,
        trace_id=get_trace_id(request),
    )
    return JSONResponse(
        status_code=HTTP_429,
        content=error.to_body(),
        media_type=PROBLEM_MEDIA_TYPE,
    )
