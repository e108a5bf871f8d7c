# This file defines the API descriptor and health endpoints.
# It exists so uptime checks and curious clients can confirm the service is reachable.
# Neither endpoint touches the stores, so they stay cheap enough to poll.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from neuralink_backend.api.api_config import ApiConfig
from neuralink_backend.api.dependencies import get_config
from neuralink_backend.api.schemas.health_schemas import ApiDescriptor, HealthResponse
from neuralink_backend.common.clock import utc_timestamp

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]

RESOURCE_PATHS: tuple[str, ...] = ("/health", "/services", "/team", "/contact")


@router.get("", response_model=ApiDescriptor)
def api_descriptor(config: ConfigDep) -> dict[str, object]:
    return {
        "name": config.api_name,
        "version": config.app_version,
        "endpoints": [f"{config.api_prefix}{path}" for path in RESOURCE_PATHS],
    }


@router.get("/health", response_model=HealthResponse)
def health(config: ConfigDep) -> dict[str, object]:
    return {
        "status": "OK",
        "timestamp": utc_timestamp(),
        "service": config.api_name,
    }
