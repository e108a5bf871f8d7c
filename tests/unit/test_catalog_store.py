"""
Unit tests for the catalog store.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from neuralink_backend.api.seed_data import SERVICE_ROWS, TEAM_ROWS
from neuralink_backend.api.services.catalog_service import CatalogStore, load_contact_info
from neuralink_backend.api.services.errors import NoMatchesError, RecordNotFoundError


@pytest.fixture()
def catalog() -> CatalogStore:
    return CatalogStore.from_rows()


def test_seeded_ids_are_dense_from_one(catalog: CatalogStore) -> None:
    assert [service.id for service in catalog.list_services()] == list(range(1, len(SERVICE_ROWS) + 1))
    assert [member.id for member in catalog.list_team()] == list(range(1, len(TEAM_ROWS) + 1))


def test_get_service_and_member(catalog: CatalogStore) -> None:
    assert catalog.get_service(2).title == "Machine Learning Development"
    assert catalog.get_team_member(4).name == "Dr. James Kim"


@pytest.mark.parametrize("record_id", [None, 0, -1, 7])
def test_lookup_miss_raises(catalog: CatalogStore, record_id: int | None) -> None:
    with pytest.raises(RecordNotFoundError) as exc_info:
        catalog.get_service(record_id)
    assert exc_info.value.kind == "Service"
    assert exc_info.value.record_id == record_id

    with pytest.raises(RecordNotFoundError):
        catalog.get_team_member(record_id)


def test_find_team_by_expertise_is_case_insensitive(catalog: CatalogStore) -> None:
    members = catalog.find_team_by_expertise("COMPUTER vision")

    assert [member.name for member in members] == ["Michael Rodriguez"]


def test_find_team_by_expertise_without_matches_raises(catalog: CatalogStore) -> None:
    with pytest.raises(NoMatchesError) as exc_info:
        catalog.find_team_by_expertise("Quantum")

    assert exc_info.value.term == "quantum"


def test_duplicate_ids_are_rejected() -> None:
    rows = [SERVICE_ROWS[0], SERVICE_ROWS[0]]
    with pytest.raises(ValueError, match="Duplicate service id: 1"):
        CatalogStore.from_rows(service_rows=rows)


def test_catalog_records_are_immutable(catalog: CatalogStore) -> None:
    service = catalog.get_service(1)
    with pytest.raises(ValidationError):
        service.title = "Changed"  # type: ignore[misc]
    assert catalog.get_service(1).title == "AI Strategy Consulting"


def test_contact_info_loads_from_seed() -> None:
    contact = load_contact_info()

    assert contact.address.city == "San Francisco"
    assert contact.business_hours.friday == "9:00 AM - 6:00 PM PST"
    assert contact.model_dump(by_alias=True)["socialMedia"]["twitter"] == "https://twitter.com/neuralinklai"
