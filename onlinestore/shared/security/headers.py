"""
Response hardening middleware.

Every response gets nosniff, frame denial, a strict referrer policy and
a permissions policy. API responses also get a deny-all CSP; the docs
pages are exempt because they load their own assets. Failed responses
are marked no-store so error bodies are never cached.

Headers already set by a route are left untouched.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

DEFAULT_SECURITY_HEADERS = (
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "DENY"),
    ("Referrer-Policy", "strict-origin-when-cross-origin"),
    ("Permissions-Policy", "camera=(), microphone=(), geolocation=()"),
)
API_CONTENT_SECURITY_POLICY = "default-src 'none'; frame-ancestors 'none'"
DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds DEFAULT_SECURITY_HEADERS (and CSP / no-store where relevant)."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        headers = response.headers
        for name, value in DEFAULT_SECURITY_HEADERS:
            headers.setdefault(name, value)

        if not request.url.path.startswith(DOCS_PATHS):
            headers.setdefault("Content-Security-Policy", API_CONTENT_SECURITY_POLICY)
        if response.status_code >= 400:
            headers.setdefault("Cache-Control", "no-store")
        return response
