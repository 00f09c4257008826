"""Markdown heading discovery and section boundaries."""

from __future__ import annotations

import logging
import re
from typing import List, Sequence

from .errors import BadRequestError
from .schemas import WHOLE_DOCUMENT, Section, SectionChoice

logger = logging.getLogger(__name__)

_LEVEL_RE = re.compile(r"^(#{1,6})\s+")
_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")


def heading_level(line: str) -> int:
    """Return the heading level of ``line`` (1-6), or 0 if not a heading."""
    match = _LEVEL_RE.match(line)
    return len(match.group(1)) if match else 0


def list_section_choices(lines: Sequence[str]) -> List[SectionChoice]:
    """Return the picker entries for a document.

    The whole-document entry comes first, followed by every heading in
    line order. Labels are indented two spaces per level below 1.
    """

    choices: List[SectionChoice] = [WHOLE_DOCUMENT]
    for index, line in enumerate(lines):
        match = _HEADING_RE.match(line)
        if not match:
            continue
        level = len(match.group(1))
        choices.append(
            SectionChoice(label=f"{'  ' * (level - 1)}{match.group(2)}", line=index)
        )
    logger.debug("Found %d headings", len(choices) - 1)
    return choices


def locate_section(lines: Sequence[str], choice: SectionChoice) -> Section:
    """Compute the body range of ``choice`` within ``lines``.

    A heading's body runs until the line before the next heading of the
    same or a higher level (fewer ``#``), or to the end of the document.

    Raises:
        BadRequestError: If the choice points past the end of the document.
    """

    last = len(lines) - 1
    if choice.is_whole_document:
        return Section(label=choice.label, start_line=0, end_line=last)

    heading_line = choice.line
    if heading_line < 0 or heading_line > last:
        raise BadRequestError(
            "Section heading is outside the document",
            {"line": heading_line, "line_count": len(lines)},
        )

    level = heading_level(lines[heading_line])
    start = heading_line + 1
    end = last
    for index in range(start, len(lines)):
        other = heading_level(lines[index])
        if 0 < other <= level:
            end = index - 1
            break
    return Section(label=choice.label, start_line=start, end_line=end)
