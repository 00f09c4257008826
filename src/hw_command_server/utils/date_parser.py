"""Date/time parsing helpers.

Provides tolerant ISO 8601 parsing, including support for 'Z' suffix
normalization to '+00:00', and conversion to the fixed display offset
used for post timestamps.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone


def _replace_z_suffix(value: str) -> str:
    if value.endswith("Z"):
        return value[:-1] + "+00:00"
    return value


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 string into a timezone-aware datetime.

    Accepts values ending with 'Z' by converting to '+00:00'. Values
    without an offset are taken to be UTC.

    Raises:
        ValueError: If the timestamp cannot be parsed.
    """

    normalized = _replace_z_suffix(value.strip())
    dt = datetime.fromisoformat(normalized)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_display_time(value: str, *, offset_hours: int = -4) -> datetime:
    """Convert an ISO 8601 timestamp to a fixed UTC offset.

    The offset is applied as-is regardless of the date, so no daylight
    saving transitions are observed. With the default of -4 this matches
    US Eastern summer time and is an hour early in winter.

    Example:
        >>> dt = to_display_time("2024-06-18T16:45:00Z")
        >>> dt.strftime("%Y-%m-%d %H:%M")
        '2024-06-18 12:45'
    """
    dt = parse_iso8601(value)
    return dt.astimezone(timezone(timedelta(hours=offset_hours)))
