# This file provides dependency factories for FastAPI routes.
# It exists so the stores built by `create_app` reach handlers through dependency injection.
# Stores live on `app.state`, so each application instance owns its own catalog and ledger
# and tests can build fresh ones or override these factories.

from __future__ import annotations

from fastapi import Request

from neuralink_backend.api.api_config import ApiConfig
from neuralink_backend.api.schemas.contact_schemas import ContactInfo
from neuralink_backend.api.services.catalog_service import CatalogStore
from neuralink_backend.api.services.consultation_ledger import ConsultationLedger


def get_config(request: Request) -> ApiConfig:
    return request.app.state.config


def get_catalog_store(request: Request) -> CatalogStore:
    return request.app.state.catalog_store


def get_consultation_ledger(request: Request) -> ConsultationLedger:
    return request.app.state.consultation_ledger


def get_contact_info(request: Request) -> ContactInfo:
    return request.app.state.contact_info
