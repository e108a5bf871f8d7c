# This file provides shared helpers for API endpoint tests.
# It exists so every test gets a fresh application with its own catalog and ledger.
# The helpers build consistent config objects and scoped TestClient contexts.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from neuralink_backend.api.api_config import ApiConfig
from neuralink_backend.api.app import create_app
from neuralink_backend.api.rate_limit import RateLimitPolicy
from neuralink_backend.api.services.catalog_service import CatalogStore
from neuralink_backend.api.services.consultation_ledger import ConsultationLedger

JOHN_DOE = {
    "name": "John Doe",
    "email": "john.doe@example.com",
    "message": "Interested in AI.",
}


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "NeuraLink AI Backend",
        "app_version": "1.0.0",
        "environment": "test",
        "allowed_origins": ["*"],
        "trust_proxy": True,
        "rate_limit_enabled": False,
        "rate_limit_max_requests": 100,
        "rate_limit_window_seconds": 900,
        "max_body_bytes": 100 * 1024,
        "enable_request_logging": False,
        "enable_metrics": True,
    }
    values.update(overrides)
    return ApiConfig(**values)


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    catalog_store: CatalogStore | None = None,
    consultation_ledger: ConsultationLedger | None = None,
    rate_limit_policy: RateLimitPolicy | None = None,
    dependency_overrides: dict[Any, Any] | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient bound to a freshly built app with scoped dependency overrides."""

    app = create_app(
        config or build_test_config(),
        catalog_store=catalog_store,
        consultation_ledger=consultation_ledger,
        rate_limit_policy=rate_limit_policy,
    )
    for dependency, override in (dependency_overrides or {}).items():
        app.dependency_overrides[dependency] = override

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
