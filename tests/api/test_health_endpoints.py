# This file tests the API descriptor and health endpoints.
# It exists to validate the operational contracts used by uptime monitoring.
# The tests also confirm request IDs and security headers are attached to responses.

from __future__ import annotations

from datetime import UTC, datetime

from tests.api.support import api_test_client, build_test_config


def test_health_endpoint_returns_expected_fields() -> None:
    with api_test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "OK"
    assert payload["service"] == "NeuraLink AI Backend"
    assert payload["timestamp"].endswith("Z")
    parsed = datetime.fromisoformat(payload["timestamp"].replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    assert abs((datetime.now(tz=UTC) - parsed).total_seconds()) < 60


def test_api_descriptor_lists_resource_endpoints() -> None:
    config = build_test_config()
    with api_test_client(config=config) as client:
        response = client.get("/api")

    assert response.status_code == 200
    assert response.json() == {
        "name": config.api_name,
        "version": "1.0.0",
        "endpoints": ["/api/health", "/api/services", "/api/team", "/api/contact"],
    }


def test_request_id_is_generated_or_echoed() -> None:
    with api_test_client() as client:
        generated = client.get("/api/health")
        echoed = client.get("/api/health", headers={"x-request-id": "req-123"})

    assert generated.headers["x-request-id"]
    assert echoed.headers["x-request-id"] == "req-123"
    assert "x-response-time-ms" in echoed.headers


def test_security_headers_are_set() -> None:
    with api_test_client() as client:
        response = client.get("/api/health")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert "content-security-policy" in response.headers
