"""
Unit tests for settings and API config loading.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest
from pydantic import ValidationError

from neuralink_backend.api import api_config as api_config_module
from neuralink_backend.common import settings as settings_module
from neuralink_backend.common.clock import format_utc_timestamp


def test_load_settings_success() -> None:
    settings_module.get_settings.cache_clear()
    settings = settings_module.get_settings()
    assert settings.PROJECT_NAME
    assert settings.PORT > 0


def test_load_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in settings_module.SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)

    settings = settings_module.load_settings(load_env=False)

    assert settings.PORT == 3001
    assert settings.HOST == "0.0.0.0"
    assert settings.LOG_LEVEL == "INFO"


def test_environment_name_is_owned_by_api_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "staging")

    settings = settings_module.load_settings(load_env=False)
    config = api_config_module.load_api_config(load_env=False)

    assert "NODE_ENV" not in settings.model_dump()
    assert config.environment == "staging"
    assert config.docs_enabled() is True


def test_load_settings_invalid_port(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_api_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "production")
    monkeypatch.setenv("CORS_ORIGIN", "https://neuralink-ai.com, https://www.neuralink-ai.com")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "10")
    monkeypatch.setenv("TRUST_PROXY", "false")

    config = api_config_module.load_api_config(load_env=False)

    assert config.allowed_origins == ["https://neuralink-ai.com", "https://www.neuralink-ai.com"]
    assert config.rate_limit_max_requests == 10
    assert config.trust_proxy is False
    assert config.docs_enabled() is False


def test_api_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("CORS_ORIGIN", "RATE_LIMIT_MAX_REQUESTS", "RATE_LIMIT_WINDOW_SECONDS", "MAX_BODY_BYTES"):
        monkeypatch.delenv(key, raising=False)

    config = api_config_module.load_api_config(load_env=False)

    assert config.allowed_origins == ["*"]
    assert config.rate_limit_max_requests == 100
    assert config.rate_limit_window_seconds == 900
    assert config.max_body_bytes == 102400
    assert config.openapi_path() == "/api-docs/openapi.json"


def test_api_config_wildcard_wins_in_origin_list(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGIN", "https://a.example,*")

    assert api_config_module.load_api_config(load_env=False).allowed_origins == ["*"]


def test_api_config_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRUST_PROXY", "maybe")
    with pytest.raises(ValueError, match="TRUST_PROXY must be boolean-like"):
        api_config_module.load_api_config(load_env=False)

    with pytest.raises(ValidationError):
        api_config_module.ApiConfig(max_body_bytes=0)


def test_format_utc_timestamp_requires_aware_datetime() -> None:
    from datetime import UTC, datetime, timedelta, timezone

    offset = timezone(timedelta(hours=2))
    assert format_utc_timestamp(datetime(2024, 1, 15, 12, 30, tzinfo=offset)) == "2024-01-15T10:30:00.000Z"
    assert format_utc_timestamp(datetime(2024, 1, 15, 10, 30, tzinfo=UTC)).endswith("Z")
    with pytest.raises(ValueError):
        format_utc_timestamp(datetime(2024, 1, 15, 10, 30))
