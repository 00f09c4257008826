"""Document source implementations."""

from .factory import create_document_source
from .local_file import LocalVaultDocumentSource

__all__ = ["LocalVaultDocumentSource", "create_document_source"]
