"""Document source abstraction layer.

The sorter only needs to list, read and write documents addressed by a
logical id. Implementations decide where the text lives; the local
vault source (see ``sources.local_file``) maps ids to Markdown files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .schemas import DocumentInfo


class DocumentSource(ABC):
    """Abstract interface for document sources."""

    @abstractmethod
    def list_documents(self) -> List[DocumentInfo]:
        """Return the documents that can be chosen for sorting."""
        pass

    @abstractmethod
    def read_document(self, doc_id: str) -> str:
        """Return the full text of a document.

        Raises:
            NotFoundError: If no document has this id.
            IOErrorApp: If the document exists but cannot be read.
        """
        pass

    @abstractmethod
    def write_document(self, doc_id: str, text: str) -> None:
        """Replace the full text of a document in a single write.

        Raises:
            NotFoundError: If no document has this id.
            IOErrorApp: If the document cannot be written.
        """
        pass
