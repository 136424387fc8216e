"""HTTP middleware for request logging and security headers."""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

_logger = logging.getLogger(__name__)

_QUIET_PATHS = frozenset({"/health", "/ready", "/live"})

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
}

_HSTS_VALUE = "max-age=31536000; includeSubDomains"


def response_log_level(status_code: int, *, production: bool) -> int:
    """Pick the log level for a completed request."""
    if status_code >= 500:  # noqa: PLR2004
        return logging.ERROR
    if status_code >= 400:  # noqa: PLR2004
        return logging.WARNING
    return logging.INFO if production else logging.DEBUG


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each completed request with its status and duration."""

    def __init__(self, app: ASGIApp, *, production: bool = False) -> None:
        super().__init__(app)
        self.production = production

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        path = request.url.path
        if path in _QUIET_PATHS:
            return response
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        _logger.log(
            response_log_level(response.status_code, production=self.production),
            "%s %s -> %s (%sms)",
            request.method,
            path,
            response.status_code,
            elapsed_ms,
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Attach conservative security headers to every response."""

    def __init__(self, app: ASGIApp, *, enable_hsts: bool = False) -> None:
        super().__init__(app)
        self.enable_hsts = enable_hsts

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for name, value in _SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if self.enable_hsts:
            response.headers.setdefault("Strict-Transport-Security", _HSTS_VALUE)
        return response
