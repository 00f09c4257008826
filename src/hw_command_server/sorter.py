"""In-place re-ordering of the timestamp rows of a section.

Within the chosen range, timestamp rows are moved to the top in
display order (undecodable first, then latest first), the remaining
non-blank lines follow in their original order, and blank lines fill
the rest of the range. The number of lines never changes, so anything
outside the range keeps its position and text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .schemas import Section
from .timestamps import TimestampedEntry, is_timestamp_row, parse_timestamp, sort_entries


@dataclass
class SortResult:
    lines: List[str]
    sorted_count: int

    @property
    def modified(self) -> bool:
        return self.sorted_count > 0


def collect_entries(lines: Sequence[str], section: Section) -> tuple[List[TimestampedEntry], List[str]]:
    """Split a section into timestamp rows and the other lines."""

    entries: List[TimestampedEntry] = []
    others: List[str] = []
    for index in range(section.start_line, section.end_line + 1):
        line = lines[index]
        if is_timestamp_row(line):
            entries.append(
                TimestampedEntry(
                    text=line,
                    timestamp=parse_timestamp(line),
                    original_position=index,
                )
            )
        else:
            others.append(line)
    return entries, others


def sort_section(lines: Sequence[str], section: Section) -> SortResult:
    """Return the document with ``section`` rewritten in sorted order.

    When the section has no timestamp rows the lines come back as-is
    and ``sorted_count`` is 0.
    """

    new_lines = list(lines)
    entries, others = collect_entries(lines, section)
    if not entries:
        return SortResult(lines=new_lines, sorted_count=0)

    body = [entry.text for entry in sort_entries(entries)]
    body.extend(line for line in others if line.strip())
    slots = section.line_count
    body = body[:slots] + [""] * (slots - len(body))

    new_lines[section.start_line : section.end_line + 1] = body
    return SortResult(lines=new_lines, sorted_count=len(entries))
