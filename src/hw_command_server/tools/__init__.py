"""MCP tools for extracting posts and sorting timestamped sections.

Each tool is exposed as a plain Python function to facilitate testing.
An MCP runtime adapter (see `server.py`) registers these with the
FastMCP runtime. The tool functions return Pydantic models.
"""

from .notes import list_documents, list_sections, sort_section
from .posts import extract_posts

__all__ = [
    "extract_posts",
    "list_documents",
    "list_sections",
    "sort_section",
]
