"""Timestamp prefixes for list lines.

A timestamp row is a Markdown list item whose text starts with a date
code between dashes::

    - 20240601 - Moved to the new flat
    - 202406181245 - [Some post](https://www.reddit.com/r/test/comments/abc/)

Eight digits are ``YYYYMMDD`` (local midnight), twelve are
``YYYYMMDDHHmm``. Decoded values are naive datetimes; no timezone is
attached to anything written in a document.

Two checks decide whether a line belongs to the sortable bucket. The
strict grammar decodes a timestamp; the loose one (any run of 8 to 12
digits) also claims the line, with a null timestamp, so that rows with
a mistyped code are pulled out of the prose and float to the top of
the sorted block where they are easy to spot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from functools import cmp_to_key
from typing import Iterable, List, Optional

_STRICT_RE = re.compile(r"^-\s+(\d{8}|\d{12})\s+-\s+", re.ASCII)
_LOOSE_RE = re.compile(r"^-\s+\d{8,12}\s+-\s+", re.ASCII)


@dataclass(frozen=True)
class TimestampedEntry:
    """One timestamp row of a scanned range.

    Attributes:
        text: The original line, never modified.
        timestamp: Decoded value, or None for rows matching only the
            loose pattern (or holding an impossible date).
        original_position: Absolute line index in the document.
    """

    text: str
    timestamp: Optional[datetime]
    original_position: int


def parse_timestamp(line: str) -> Optional[datetime]:
    """Decode the date code at the start of ``line``.

    Returns None when the line does not follow the strict grammar, or
    when the digits do not name a real calendar date or clock time
    (``20241340`` for instance).

    Example:
        >>> parse_timestamp("- 202406181245 - lunch")
        datetime.datetime(2024, 6, 18, 12, 45)
    """

    match = _STRICT_RE.match(line)
    if not match:
        return None

    code = match.group(1)
    try:
        if len(code) == 8:
            return datetime(int(code[0:4]), int(code[4:6]), int(code[6:8]))
        return datetime(
            int(code[0:4]),
            int(code[4:6]),
            int(code[6:8]),
            int(code[8:10]),
            int(code[10:12]),
        )
    except ValueError:
        return None


def is_timestamp_row(line: str) -> bool:
    """True if ``line`` goes into the sortable bucket.

    Applies both the strict and the loose check; a line with a
    nine-digit code is a timestamp row even though it has no timestamp.
    """

    return bool(_STRICT_RE.match(line) or _LOOSE_RE.match(line))


def format_timestamp_code(value: datetime) -> str:
    """Render ``value`` as a twelve digit ``YYYYMMDDHHmm`` code."""

    return (
        f"{value.year:04d}{value.month:02d}{value.day:02d}"
        f"{value.hour:02d}{value.minute:02d}"
    )


def format_post_line(value: datetime, title: str, url: str) -> str:
    """Build a ``- YYYYMMDDHHmm - [title](url)`` list line."""

    return f"- {format_timestamp_code(value)} - [{title}]({url})"


def compare_entries(a: TimestampedEntry, b: TimestampedEntry) -> int:
    """Order entries: null timestamps first, then latest first.

    Null entries keep their encounter order. Entries with equal
    timestamps compare equal and rely on the stability of ``sorted``.
    """

    if a.timestamp is None and b.timestamp is None:
        return a.original_position - b.original_position
    if a.timestamp is None:
        return -1
    if b.timestamp is None:
        return 1
    if a.timestamp > b.timestamp:
        return -1
    if a.timestamp < b.timestamp:
        return 1
    return 0


def sort_entries(entries: Iterable[TimestampedEntry]) -> List[TimestampedEntry]:
    """Return ``entries`` in display order (see :func:`compare_entries`)."""

    return sorted(entries, key=cmp_to_key(compare_entries))
