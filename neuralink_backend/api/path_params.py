# This file parses record ids taken from URL path segments.
# It exists so every id-based endpoint treats malformed ids the same way.
# Parsing reads the leading base-10 integer, so `2abc` and `1.5` resolve to 2 and 1.
# A segment without a leading integer, or one too long to be a stored id, yields `None`.

from __future__ import annotations

import re

_LEADING_INTEGER_RE = re.compile(r"\s*([+-]?)([0-9]+)")

# Ids are small sequential integers; longer digit runs can never match a record.
MAX_ID_DIGITS = 18


def parse_record_id(raw: str) -> int | None:
    match = _LEADING_INTEGER_RE.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_ID_DIGITS:
        return None
    return int(f"{sign}{digits}")


def record_id_label(raw: str, parsed: int | None) -> str:
    """Return the id text used in not-found messages."""

    return str(parsed) if parsed is not None else raw
