# This file defines runtime settings for the API layer in one place.
# It exists so CORS, rate limiting, body limits, and docs exposure can be configured without code edits.
# The config loader reads environment variables and applies defaults matching the public site deployment.
# Validators reject non-positive limits and malformed paths before the app starts serving.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

PRODUCTION_ENVIRONMENTS = frozenset({"production", "prod"})


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "NeuraLink AI Backend"
    app_version: str = "1.0.0"
    environment: str = "development"
    api_prefix: str = "/api"
    docs_path: str = "/api-docs"
    allowed_origins: list[str] = Field(default_factory=lambda: ["*"])
    cors_methods: list[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    trust_proxy: bool = True
    rate_limit_enabled: bool = True
    rate_limit_max_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60
    max_body_bytes: int = 100 * 1024
    enable_request_logging: bool = True
    enable_metrics: bool = True

    @field_validator("api_prefix", "docs_path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("Paths must start with '/'.")
        return value.rstrip("/") or "/"

    @field_validator("rate_limit_max_requests", "rate_limit_window_seconds", "max_body_bytes")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    def docs_enabled(self) -> bool:
        return self.environment.strip().lower() not in PRODUCTION_ENVIRONMENTS

    def openapi_path(self) -> str:
        return f"{self.docs_path}/openapi.json"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    origins = _env_list("CORS_ORIGIN", ["*"])
    if "*" in origins:
        origins = ["*"]

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "NeuraLink AI Backend"),
        "app_version": os.getenv("APP_VERSION", "1.0.0"),
        "environment": os.getenv("NODE_ENV", "development"),
        "allowed_origins": origins,
        "trust_proxy": _env_bool("TRUST_PROXY", True),
        "rate_limit_enabled": _env_bool("RATE_LIMIT_ENABLED", True),
        "rate_limit_max_requests": _env_int("RATE_LIMIT_MAX_REQUESTS", 100),
        "rate_limit_window_seconds": _env_int("RATE_LIMIT_WINDOW_SECONDS", 15 * 60),
        "max_body_bytes": _env_int("MAX_BODY_BYTES", 100 * 1024),
        "enable_request_logging": _env_bool("API_ENABLE_REQUEST_LOGGING", True),
        "enable_metrics": _env_bool("API_ENABLE_METRICS", True),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
