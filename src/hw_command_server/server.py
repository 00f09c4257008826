"""FastMCP server entrypoint.

Registers tools for the HW Command Server. This module intentionally
keeps the tool implementations decoupled so they can be unit-tested
without the runtime.

Note: We import FastMCP lazily so the core stays importable without
the MCP runtime installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import AppConfig, load_config
from .document_source import DocumentSource
from .schemas import (
    ExtractPostsInput,
    ExtractPostsOutput,
    ListDocumentsOutput,
    ListSectionsInput,
    ListSectionsOutput,
    SortSectionInput,
    SortSectionOutput,
)
from .sources import create_document_source
from .tools import extract_posts, list_documents, list_sections, sort_section


def _register_fastmcp_tools(app, config: AppConfig, source: DocumentSource):
    # Namespace: hw.*

    @app.tool("hw.posts.extract")
    def posts_extract(params: ExtractPostsInput) -> ExtractPostsOutput:
        return extract_posts(config, params)

    @app.tool("hw.documents.list")
    def documents_list() -> ListDocumentsOutput:
        return list_documents(config, source)

    @app.tool("hw.sections.list")
    def sections_list(params: ListSectionsInput) -> ListSectionsOutput:
        return list_sections(config, source, params)

    @app.tool("hw.sections.sort")
    def sections_sort(params: SortSectionInput) -> SortSectionOutput:
        return sort_section(config, source, params)


def configure_logging(config: AppConfig) -> None:
    """Send log records to stderr; stdout belongs to the stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> None:
    """Run the FastMCP application.

    This function loads configuration, creates the document source, and
    registers all tools with the FastMCP runtime. It is safe to import
    and call `main()` from other entrypoints.
    """

    argv = argv if argv is not None else sys.argv[1:]
    config = load_config()
    configure_logging(config)
    source = create_document_source(config)

    try:
        from fastmcp import FastMCP
    except Exception as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "fastmcp is not installed. Install with 'pip install hw-command-server[mcp]'"
        ) from exc

    app = FastMCP("hw-command-server")
    _register_fastmcp_tools(app, config, source)

    logging.getLogger(__name__).info("Serving documents from %s", config.vault_path)
    app.run()


if __name__ == "__main__":  # pragma: no cover
    main()
