# This file defines the team endpoints, including the expertise search.
# The expertise route is registered before the id route so `/team/expertise/...` never parses as an id.
# An expertise search with no matches is reported as a 404, not an empty list.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from neuralink_backend.api.dependencies import get_catalog_store
from neuralink_backend.api.error_handlers import APIError
from neuralink_backend.api.path_params import parse_record_id, record_id_label
from neuralink_backend.api.schemas.catalog_schemas import TeamMember
from neuralink_backend.api.schemas.common import ErrorResponse
from neuralink_backend.api.services.catalog_service import CatalogStore
from neuralink_backend.api.services.errors import NoMatchesError, RecordNotFoundError

router = APIRouter(prefix="/team", tags=["team"])
CatalogDep = Annotated[CatalogStore, Depends(get_catalog_store)]


@router.get("", response_model=list[TeamMember])
def list_team(catalog: CatalogDep) -> list[TeamMember]:
    return catalog.list_team()


@router.get(
    "/expertise/{skill}",
    response_model=list[TeamMember],
    responses={404: {"model": ErrorResponse}},
)
def find_team_by_expertise(skill: str, catalog: CatalogDep) -> list[TeamMember]:
    try:
        return catalog.find_team_by_expertise(skill)
    except NoMatchesError as exc:
        raise APIError(
            status_code=404,
            error="No team members found",
            message=f'No team members found with expertise in "{exc.term}"',
        ) from exc


@router.get("/{member_id}", response_model=TeamMember, responses={404: {"model": ErrorResponse}})
def get_team_member(member_id: str, catalog: CatalogDep) -> TeamMember:
    parsed_id = parse_record_id(member_id)
    try:
        return catalog.get_team_member(parsed_id)
    except RecordNotFoundError as exc:
        raise APIError(
            status_code=404,
            error="Team member not found",
            message=f"Team member with ID {record_id_label(member_id, parsed_id)} does not exist",
        ) from exc
