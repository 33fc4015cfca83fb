"""Status expiry durations.

Two inputs produce a `timedelta`: the fixed choices of the interactive picker
and free-form duration strings from `--expiry` (`30m`, `1h30m`, `7d`, `0s`).
The mutation needs the inverse: "no expiry" or an absolute timestamp.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

NEVER = "Never"

# Picker order matters: it is what the prompt shows.
EXPIRY_CHOICES: dict[str, timedelta] = {
    NEVER: timedelta(0),
    "30m": timedelta(minutes=30),
    "1h": timedelta(hours=1),
    "4h": timedelta(hours=4),
    "24h": timedelta(hours=24),
    "7d": timedelta(hours=168),
}

# `gh` expects RFC 3339-ish local time with a numeric offset, e.g. 2026-10-19T14:05:00+0200.
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
NO_EXPIRY = "null"

_UNITS: dict[str, timedelta] = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
}
_DURATION_RE = re.compile(r"(\d+(?:\.\d+)?)([smhd])")

# Same ceiling as a signed 64-bit nanosecond count (about 292 years).
MAX_EXPIRY = timedelta(hours=2562047)


def parse_expiry(text: str) -> timedelta:
    """Parse a picker choice or a duration string into a `timedelta`.

    Raises `ValueError` for anything that is not a known choice or a sequence of
    `<number><unit>` parts with units s, m, h, d.
    """

    value = (text or "").strip()
    if not value or value.lower() == NEVER.lower():
        return timedelta(0)
    if value in EXPIRY_CHOICES:
        return EXPIRY_CHOICES[value]

    lowered = value.lower()
    total = timedelta(0)
    pos = 0
    try:
        for match in _DURATION_RE.finditer(lowered):
            if match.start() != pos:
                break
            total += float(match.group(1)) * _UNITS[match.group(2)]
            pos = match.end()
    except OverflowError as exc:
        raise ValueError(f"duration out of range: {text!r}") from exc
    if pos == 0 or pos != len(lowered):
        raise ValueError(f"invalid duration: {text!r}")
    if total > MAX_EXPIRY:
        raise ValueError(f"duration out of range: {text!r}")
    return total


def format_expiry(expires_at: datetime | None) -> str:
    """Render the `expiry` GraphQL variable: `null` or a local timestamp."""

    if expires_at is None:
        return NO_EXPIRY
    if expires_at.tzinfo is None:
        expires_at = expires_at.astimezone()
    return expires_at.strftime(TIMESTAMP_FORMAT)
