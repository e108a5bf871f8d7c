# This file defines lookup errors raised by the in-memory stores.
# Routers translate them into `APIError` responses with resource-specific wording.

from __future__ import annotations


class RecordNotFoundError(LookupError):
    """Raised when an id lookup matches no stored record."""

    def __init__(self, kind: str, record_id: int | None) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with ID {record_id} does not exist")


class NoMatchesError(LookupError):
    """Raised when a filter yields no records."""

    def __init__(self, kind: str, term: str) -> None:
        self.kind = kind
        self.term = term
        super().__init__(f"No {kind} matched {term!r}")
