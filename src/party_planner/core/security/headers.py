"""Security headers for an API that only serves JSON (plus the docs pages)."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# JSON responses never load scripts, styles or frames
API_CSP = "default-src 'none'; frame-ancestors 'none'"

# Swagger UI and ReDoc pull their assets from jsdelivr
DOCS_CSP = (
    "default-src 'self'; "
    "script-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "style-src 'self' 'unsafe-inline' cdn.jsdelivr.net; "
    "img-src 'self' data: cdn.jsdelivr.net fastapi.tiangolo.com; "
    "frame-ancestors 'none'"
)

DOCS_PATHS = frozenset({"/docs", "/docs/oauth2-redirect", "/redoc"})


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp every response with a fixed set of security headers.

    The mobile client ignores these; they matter for the docs pages and for
    anyone poking at the API from a browser.
    """

    def __init__(self, app: ASGIApp, docs_paths: frozenset[str] = DOCS_PATHS):
        super().__init__(app)
        self.docs_paths = docs_paths
        self.common_headers = {
            "X-Content-Type-Options": "nosniff",
            "X-Frame-Options": "DENY",
            "Referrer-Policy": "no-referrer",
            "Cross-Origin-Resource-Policy": "same-site",
        }

    def content_security_policy(self, path: str) -> str:
        return DOCS_CSP if path in self.docs_paths else API_CSP

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        response.headers.update(self.common_headers)
        response.headers["Content-Security-Policy"] = self.content_security_policy(
            request.url.path
        )
        return response
