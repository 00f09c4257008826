"""Pydantic schemas for command results and tool inputs/outputs.

These models define the JSON contracts used by the MCP tools and the
value objects passed between the extractor, the section locator and
the sorter.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

WHOLE_DOCUMENT_LABEL = "📄 Entire Document"


class ExtractedPost(BaseModel):
    """A post found in pasted HTML.

    Attributes:
        title: Display title, never empty.
        canonical_url: Absolute URL of the post's comment page.
        local_timestamp: Creation time shifted to the display offset.
    """

    title: str = Field(min_length=1)
    canonical_url: str
    local_timestamp: datetime


class SectionChoice(BaseModel):
    """An entry in the section picker.

    ``line`` is the heading's line index, or None for the whole document.
    """

    label: str
    line: Optional[int] = None

    @property
    def is_whole_document(self) -> bool:
        return self.line is None


WHOLE_DOCUMENT = SectionChoice(label=WHOLE_DOCUMENT_LABEL, line=None)


class Section(BaseModel):
    """Inclusive line range of a section body (heading line excluded).

    An empty section has ``start_line == end_line + 1``.
    """

    label: str
    start_line: int = Field(ge=0)
    end_line: int = Field(ge=-1)

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1


# Inputs / outputs


class ExtractPostsInput(BaseModel):
    html: str = Field(description="HTML copied from a subreddit listing page")


class ExtractPostsOutput(BaseModel):
    lines: List[str]
    count: int
    message: str


class DocumentInfo(BaseModel):
    id: str
    size_bytes: int


class ListDocumentsOutput(BaseModel):
    items: List[DocumentInfo]


class ListSectionsInput(BaseModel):
    document_id: str


class ListSectionsOutput(BaseModel):
    document_id: str
    sections: List[SectionChoice]


class SortSectionInput(BaseModel):
    document_id: str
    line: Optional[int] = Field(
        default=None,
        ge=0,
        description="Heading line index; omit to sort the whole document",
    )


class SortSectionOutput(BaseModel):
    document_id: str
    section: Section
    sorted_count: int
    modified: bool
    message: str
