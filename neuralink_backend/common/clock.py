"""
UTC time helpers shared by the ledger and health endpoints.
Timestamps are rendered with millisecond precision and a `Z` suffix, e.g. `2024-01-15T10:30:00.000Z`.
"""

from __future__ import annotations

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return timezone-aware current UTC time."""

    return datetime.now(tz=UTC)


def format_utc_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        raise ValueError("Timestamp must be timezone-aware.")
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp() -> str:
    return format_utc_timestamp(utc_now())
