"""Local vault document source.

Serves the Markdown files below a vault directory. Document ids are
POSIX paths relative to the vault root, e.g. ``journal/2024.md``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..document_source import DocumentSource
from ..errors import BadRequestError, IOErrorApp, NotFoundError
from ..schemas import DocumentInfo


class LocalVaultDocumentSource(DocumentSource):
    """Document source that reads and writes files under a vault directory.

    Args:
        vault_path: Root directory of the vault.
        suffix: File suffix of the documents to offer.
    """

    def __init__(self, vault_path: str | Path, *, suffix: str = ".md"):
        self._root = Path(vault_path)
        self._suffix = suffix

    @property
    def root(self) -> Path:
        return self._root

    def list_documents(self) -> List[DocumentInfo]:
        """List vault documents sorted by id."""
        if not self._root.is_dir():
            raise IOErrorApp(
                f"Vault directory not found: {self._root}", {"path": str(self._root)}
            )
        items = [
            DocumentInfo(
                id=path.relative_to(self._root).as_posix(),
                size_bytes=path.stat().st_size,
            )
            for path in self._root.rglob(f"*{self._suffix}")
            if path.is_file()
        ]
        items.sort(key=lambda item: item.id)
        return items

    def read_document(self, doc_id: str) -> str:
        path = self._resolve(doc_id)
        try:
            with path.open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise IOErrorApp(
                "Failed to read document", {"id": doc_id, "reason": str(exc)}
            ) from exc

    def write_document(self, doc_id: str, text: str) -> None:
        path = self._resolve(doc_id)
        try:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(text)
        except OSError as exc:
            raise IOErrorApp(
                "Failed to write document", {"id": doc_id, "reason": str(exc)}
            ) from exc

    def _resolve(self, doc_id: str) -> Path:
        if not doc_id:
            raise BadRequestError("'document_id' is required")
        root = self._root.resolve()
        path = (root / doc_id).resolve()
        if not path.is_relative_to(root):
            raise BadRequestError(
                "Document id points outside the vault", {"id": doc_id}
            )
        if not path.is_file():
            raise NotFoundError("Document not found", {"id": doc_id})
        return path
