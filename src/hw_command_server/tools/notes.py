"""Document tool functions: list documents, list sections, sort a section.

These functions implement the read/modify surface over the document
source. A sort computes the complete new text before the single write,
and skips the write entirely when there is nothing to sort.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..config import AppConfig
from ..document_source import DocumentSource
from ..errors import BadRequestError, InputEmptyError
from ..schemas import (
    WHOLE_DOCUMENT,
    ListDocumentsOutput,
    ListSectionsInput,
    ListSectionsOutput,
    SectionChoice,
    SortSectionInput,
    SortSectionOutput,
)
from ..sections import list_section_choices, locate_section
from ..sorter import sort_section as sort_lines

logger = logging.getLogger(__name__)

NOTHING_TO_SORT_MESSAGE = "No timestamped entries found in the selected section"


def _read_lines(source: DocumentSource, document_id: str) -> List[str]:
    text = source.read_document(document_id)
    if not text:
        raise InputEmptyError("Document is empty", {"id": document_id})
    return text.split("\n")


def list_documents(config: AppConfig, source: DocumentSource) -> ListDocumentsOutput:
    """List the documents available for sorting."""

    return ListDocumentsOutput(items=source.list_documents())


def list_sections(
    config: AppConfig, source: DocumentSource, params: ListSectionsInput
) -> ListSectionsOutput:
    """List the section choices of a document, whole document first."""

    lines = _read_lines(source, params.document_id)
    sections = list_section_choices(lines)
    if config.debug:
        for choice in sections:
            logger.debug("Section %r at line %s", choice.label, choice.line)
    return ListSectionsOutput(document_id=params.document_id, sections=sections)


def resolve_choice(lines: List[str], line: int | None) -> SectionChoice:
    """Map a heading line index back to its picker entry."""

    if line is None:
        return WHOLE_DOCUMENT
    for choice in list_section_choices(lines):
        if choice.line == line:
            return choice
    raise BadRequestError("No heading at this line", {"line": line})


def sort_section_in_document(
    config: AppConfig,
    source: DocumentSource,
    document_id: str,
    choice: SectionChoice,
    *,
    lines: Optional[List[str]] = None,
) -> SortSectionOutput:
    """Sort one section of a stored document and write it back.

    ``lines`` is the document as already read by the caller, so the
    choice is applied to the same text it was resolved against.
    """

    if lines is None:
        lines = _read_lines(source, document_id)
    section = locate_section(lines, choice)
    result = sort_lines(lines, section)

    if not result.modified:
        return SortSectionOutput(
            document_id=document_id,
            section=section,
            sorted_count=0,
            modified=False,
            message=NOTHING_TO_SORT_MESSAGE,
        )

    source.write_document(document_id, "\n".join(result.lines))
    if config.debug:
        logger.debug("Sorted timestamps in %s, section: %s", document_id, section.label)
    return SortSectionOutput(
        document_id=document_id,
        section=section,
        sorted_count=result.sorted_count,
        modified=True,
        message=f'Sorted {result.sorted_count} timestamped entries in "{choice.label}"',
    )


def sort_section(
    config: AppConfig, source: DocumentSource, params: SortSectionInput
) -> SortSectionOutput:
    """Sort the section headed at ``params.line`` (or the whole document)."""

    lines = _read_lines(source, params.document_id)
    choice = resolve_choice(lines, params.line)
    return sort_section_in_document(
        config, source, params.document_id, choice, lines=lines
    )
