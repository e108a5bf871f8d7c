# This file builds the FastAPI application and registers all API routers.
# It exists so startup state, middleware, and error handling are configured in one place.
# The app owns its catalog store and consultation ledger on `app.state`, so every instance starts clean.
# Request IDs, timing headers, metrics, and access logging are added for operations visibility.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from neuralink_backend.api.api_config import ApiConfig, get_api_config
from neuralink_backend.api.error_handlers import register_error_handlers
from neuralink_backend.api.middleware import (
    BodySizeLimitMiddleware,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
    UnhandledErrorMiddleware,
    client_key,
)
from neuralink_backend.api.rate_limit import FixedWindowRateLimiter, RateLimitPolicy, UnlimitedPolicy
from neuralink_backend.api.routers.contact import router as contact_router
from neuralink_backend.api.routers.health import router as health_router
from neuralink_backend.api.routers.services import router as services_router
from neuralink_backend.api.routers.team import router as team_router
from neuralink_backend.api.schemas.contact_schemas import ContactInfo
from neuralink_backend.api.services.catalog_service import CatalogStore, load_contact_info
from neuralink_backend.api.services.consultation_ledger import ConsultationLedger
from neuralink_backend.common.logging import ACCESS_LOGGER_NAME, configure_logging

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _route_label(request: Request) -> str:
    route = request.scope.get("route")
    return getattr(route, "path", "unmatched")


def _access_log_line(
    request: Request,
    *,
    status_code: int,
    content_length: str | None,
    duration_ms: float,
    trust_proxy: bool,
) -> str:
    # Apache "combined" layout with response time and request id appended.
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    http_version = request.scope.get("http_version", "1.1")
    return (
        f'{client_key(request, trust_proxy=trust_proxy)} - - '
        f'"{request.method} {target} HTTP/{http_version}" {status_code} {content_length or "-"} '
        f'"{request.headers.get("referer", "-")}" "{request.headers.get("user-agent", "-")}" '
        f"{duration_ms:.2f}ms request_id={request.state.request_id}"
    )


def build_rate_limit_policy(config: ApiConfig) -> RateLimitPolicy:
    if not config.rate_limit_enabled:
        return UnlimitedPolicy()
    return FixedWindowRateLimiter(
        max_requests=config.rate_limit_max_requests,
        window_seconds=config.rate_limit_window_seconds,
    )


def create_app(
    config: ApiConfig | None = None,
    *,
    catalog_store: CatalogStore | None = None,
    consultation_ledger: ConsultationLedger | None = None,
    contact_info: ContactInfo | None = None,
    rate_limit_policy: RateLimitPolicy | None = None,
) -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    if config is None:
        config = get_api_config()
    if rate_limit_policy is None:
        rate_limit_policy = build_rate_limit_policy(config)
    docs_enabled = config.docs_enabled()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Marketing-site API for NeuraLink AI: service catalog, team directory, "
            "contact details, and consultation request intake."
        ),
        version=config.app_version,
        docs_url=config.docs_path if docs_enabled else None,
        redoc_url=None,
        openapi_url=config.openapi_path() if docs_enabled else None,
        openapi_tags=[
            {"name": "health", "description": "Service liveness and API descriptor."},
            {"name": "services", "description": "AI services offered by NeuraLink AI."},
            {"name": "team", "description": "Team members and expertise search."},
            {"name": "contact", "description": "Contact details and consultation requests."},
        ],
    )

    app.state.config = config
    app.state.catalog_store = catalog_store if catalog_store is not None else CatalogStore.from_rows()
    app.state.consultation_ledger = (
        consultation_ledger if consultation_ledger is not None else ConsultationLedger()
    )
    app.state.contact_info = contact_info if contact_info is not None else load_contact_info()

    app.add_middleware(UnhandledErrorMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=config.max_body_bytes)
    app.add_middleware(
        RateLimitMiddleware,
        policy=rate_limit_policy,
        path_prefix=config.api_prefix,
        trust_proxy=config.trust_proxy,
    )
    app.add_middleware(SecurityHeadersMiddleware)
    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=False,
            allow_methods=config.cors_methods,
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"

            if config.enable_request_logging:
                access_logger.info(
                    _access_log_line(
                        request,
                        status_code=status_code,
                        content_length=response.headers.get("content-length"),
                        duration_ms=duration_ms,
                        trust_proxy=config.trust_proxy,
                    )
                )

            return response
        finally:
            path_label = _route_label(request)
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    if config.enable_metrics:

        @app.get("/metrics", include_in_schema=False)
        def metrics() -> Response:
            return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router, prefix=config.api_prefix)
    app.include_router(services_router, prefix=config.api_prefix)
    app.include_router(team_router, prefix=config.api_prefix)
    app.include_router(contact_router, prefix=config.api_prefix)

    return app


app = create_app()
