"""Argument checks that raise InvalidInputError (HTTP 400)."""

import re

from sysapi.core.exceptions import InvalidInputError

# Ids are 32-bit signed INTEGER primary keys.
MAX_ID = 2**31 - 1

_ID_PATTERN = re.compile(r"[0-9]+", re.ASCII)


def require_has_text(value: str | None, message: str) -> str:
    """Return value if it contains at least one non-whitespace character."""
    if value is None or not value.strip():
        raise InvalidInputError(message)
    return value


def parse_id(raw: str | None) -> int:
    """
    Parse a path id; missing, non-numeric and out-of-range values are all 400.

    Only plain ASCII digits are accepted ("5_0", "+5" and "٥" are rejected).
    """
    if raw is None or not raw.strip():
        raise InvalidInputError("Missing id")
    digits = raw.strip()
    if not _ID_PATTERN.fullmatch(digits):
        raise InvalidInputError(f"Invalid id: {raw!r}")
    value = int(digits)
    if not 1 <= value <= MAX_ID:
        raise InvalidInputError(f"Invalid id: {raw!r}")
    return value
