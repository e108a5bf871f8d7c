# This file defines the service catalog endpoints.
# Both routes read from the seeded catalog; an unknown id returns a 404 naming the id.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from neuralink_backend.api.dependencies import get_catalog_store
from neuralink_backend.api.error_handlers import APIError
from neuralink_backend.api.path_params import parse_record_id, record_id_label
from neuralink_backend.api.schemas.catalog_schemas import Service
from neuralink_backend.api.schemas.common import ErrorResponse
from neuralink_backend.api.services.catalog_service import CatalogStore
from neuralink_backend.api.services.errors import RecordNotFoundError

router = APIRouter(prefix="/services", tags=["services"])
CatalogDep = Annotated[CatalogStore, Depends(get_catalog_store)]


@router.get("", response_model=list[Service])
def list_services(catalog: CatalogDep) -> list[Service]:
    return catalog.list_services()


@router.get("/{service_id}", response_model=Service, responses={404: {"model": ErrorResponse}})
def get_service(service_id: str, catalog: CatalogDep) -> Service:
    parsed_id = parse_record_id(service_id)
    try:
        return catalog.get_service(parsed_id)
    except RecordNotFoundError as exc:
        raise APIError(
            status_code=404,
            error="Service not found",
            message=f"Service with ID {record_id_label(service_id, parsed_id)} does not exist",
        ) from exc
