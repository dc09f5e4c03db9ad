from __future__ import annotations

import re
from typing import Any

from teacher_match.services.errors import InvalidCharacters, TooLong, TooShort, TypeMismatch

MIN_QUERY_LENGTH = 2
MAX_QUERY_LENGTH = 100

_ALLOWED_RE = re.compile(r"^[A-Za-z0-9 -]+$")


def validate_skill_query(raw: Any) -> str:
    """Trim and bound a raw skill query.

    Case is preserved; matching is case-insensitive further down. This is the
    only input boundary of the matcher and must run before any lookup.
    """
    if not isinstance(raw, str):
        raise TypeMismatch("Skill must be a string")

    trimmed = raw.strip()

    if len(trimmed) < MIN_QUERY_LENGTH:
        raise TooShort(f"Search term must be at least {MIN_QUERY_LENGTH} characters")

    if len(trimmed) > MAX_QUERY_LENGTH:
        raise TooLong(f"Search term too long (max {MAX_QUERY_LENGTH} characters)")

    if not _ALLOWED_RE.match(trimmed):
        raise InvalidCharacters("Search term contains invalid characters")

    return trimmed
