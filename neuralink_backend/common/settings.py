"""
Process settings loaded from environment variables.
It covers the values needed before the API exists: project name, log level, and listen address.
API behavior settings, including the `NODE_ENV` environment name, live in `neuralink_backend.api.api_config`.
"""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError

SETTINGS_ENV_VARS: Final[tuple[str, ...]] = (
    "PROJECT_NAME",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


class Settings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    PROJECT_NAME: str = "NeuraLink AI Backend"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3001


def load_settings(*, load_env: bool = True) -> Settings:
    """Load and validate settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    values = {key: os.environ[key] for key in SETTINGS_ENV_VARS if os.getenv(key)}

    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for process settings."""

    return load_settings()
