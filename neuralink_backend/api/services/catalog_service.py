# This file implements the read-only catalog behind the services, team, and contact endpoints.
# It exists so routers can look up seeded records without knowing how they are stored.
# Records are indexed by id once at construction; nothing mutates them afterwards.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from neuralink_backend.api.schemas.catalog_schemas import Service, TeamMember
from neuralink_backend.api.schemas.contact_schemas import ContactInfo
from neuralink_backend.api.seed_data import CONTACT_ROW, SERVICE_ROWS, TEAM_ROWS
from neuralink_backend.api.services.errors import NoMatchesError, RecordNotFoundError

_RecordT = TypeVar("_RecordT", Service, TeamMember)


def _index_by_id(records: Iterable[_RecordT], kind: str) -> dict[int, _RecordT]:
    index: dict[int, _RecordT] = {}
    for record in records:
        if record.id in index:
            raise ValueError(f"Duplicate {kind} id: {record.id}")
        index[record.id] = record
    return index


class CatalogStore:
    """Seeded services and team members."""

    def __init__(self, *, services: Iterable[Service], team: Iterable[TeamMember]) -> None:
        self._services = _index_by_id(services, "service")
        self._team = _index_by_id(team, "team member")

    @classmethod
    def from_rows(
        cls,
        *,
        service_rows: Iterable[Mapping[str, Any]] = SERVICE_ROWS,
        team_rows: Iterable[Mapping[str, Any]] = TEAM_ROWS,
    ) -> CatalogStore:
        return cls(
            services=[Service.model_validate(row) for row in service_rows],
            team=[TeamMember.model_validate(row) for row in team_rows],
        )

    def list_services(self) -> list[Service]:
        return list(self._services.values())

    def get_service(self, service_id: int | None) -> Service:
        service = self._services.get(service_id) if service_id is not None else None
        if service is None:
            raise RecordNotFoundError("Service", service_id)
        return service

    def list_team(self) -> list[TeamMember]:
        return list(self._team.values())

    def get_team_member(self, member_id: int | None) -> TeamMember:
        member = self._team.get(member_id) if member_id is not None else None
        if member is None:
            raise RecordNotFoundError("Team member", member_id)
        return member

    def find_team_by_expertise(self, skill: str) -> list[TeamMember]:
        """Return members with any expertise entry containing `skill`, ignoring case.

        An empty result raises `NoMatchesError`; the team endpoint reports it as a 404
        rather than an empty list.
        """

        needle = skill.lower()
        members = [
            member
            for member in self._team.values()
            if any(needle in area.lower() for area in member.expertise)
        ]
        if not members:
            raise NoMatchesError("team members", needle)
        return members


def load_contact_info(row: Mapping[str, Any] = CONTACT_ROW) -> ContactInfo:
    return ContactInfo.model_validate(row)
