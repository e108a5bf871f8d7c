# This file defines transport middleware wrapped around the API routes.
# It exists so security headers, the request body cap, and rate limiting stay out of handler code.
# Each middleware returns the standard `{error, message}` body when it rejects a request or a route fails.

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from neuralink_backend.api.error_handlers import error_response, internal_error_response
from neuralink_backend.api.rate_limit import RateLimitPolicy

logger = logging.getLogger(__name__)

SECURITY_HEADERS: dict[str, str] = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn an exception escaping a route into the fixed 500 body.

    Installed innermost, so the outer middleware still adds security, CORS and
    request-id headers to the error response.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return internal_error_response(request, exc)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds `max_body_bytes`."""

    def __init__(self, app: ASGIApp, *, max_body_bytes: int) -> None:
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None and declared.isdigit() and int(declared) > self.max_body_bytes:
            logger.warning(
                "Rejected %s %s: body of %s bytes exceeds %s",
                request.method,
                request.url.path,
                declared,
                self.max_body_bytes,
            )
            return error_response(
                413,
                "Payload Too Large",
                f"Request body exceeds the {self.max_body_bytes} byte limit",
            )
        return await call_next(request)


def client_key(request: Request, *, trust_proxy: bool) -> str:
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Apply a `RateLimitPolicy` to every request under `path_prefix`."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        policy: RateLimitPolicy,
        path_prefix: str,
        trust_proxy: bool,
    ) -> None:
        super().__init__(app)
        self.policy = policy
        self.path_prefix = path_prefix
        self.trust_proxy = trust_proxy

    def _applies_to(self, path: str) -> bool:
        return path == self.path_prefix or path.startswith(f"{self.path_prefix}/")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self._applies_to(request.url.path):
            return await call_next(request)

        key = client_key(request, trust_proxy=self.trust_proxy)
        decision = self.policy.check(key)
        if not decision.allowed:
            logger.warning("Rate limit exceeded for client %s on %s", key, request.url.path)
            response: Response = error_response(
                429,
                "Too Many Requests",
                "Too many requests, please try again later.",
            )
            response.headers["Retry-After"] = str(decision.reset_after_seconds)
        else:
            response = await call_next(request)

        if decision.limit:
            response.headers["RateLimit-Limit"] = str(decision.limit)
            response.headers["RateLimit-Remaining"] = str(decision.remaining)
            response.headers["RateLimit-Reset"] = str(decision.reset_after_seconds)
        return response
