"""
Unit tests for record id parsing.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import pytest

from neuralink_backend.api.path_params import MAX_ID_DIGITS, parse_record_id, record_id_label


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        ("42", 42),
        ("0", 0),
        ("-5", -5),
        ("+3", 3),
        ("007", 7),
        ("2abc", 2),
        ("1.5", 1),
        (" 4", 4),
        ("abc", None),
        ("", None),
        ("x2", None),
        ("-", None),
    ],
)
def test_parse_record_id_reads_leading_integer(raw: str, expected: int | None) -> None:
    assert parse_record_id(raw) == expected


@pytest.mark.parametrize("raw", ["9" * (MAX_ID_DIGITS + 1), "9" * 5000, "-" + "1" * 5000, "9" * 5000 + "abc"])
def test_parse_record_id_rejects_oversized_digit_runs(raw: str) -> None:
    assert parse_record_id(raw) is None


def test_parse_record_id_ignores_leading_zeros_when_sizing() -> None:
    assert parse_record_id("0" * 5000 + "3") == 3


def test_record_id_label_prefers_parsed_value() -> None:
    assert record_id_label("007", 7) == "7"
    assert record_id_label("2abc", 2) == "2"
    assert record_id_label("abc", None) == "abc"
