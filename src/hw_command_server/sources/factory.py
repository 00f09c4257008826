"""Factory for creating document sources based on configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..document_source import DocumentSource
from .local_file import LocalVaultDocumentSource

if TYPE_CHECKING:
    from ..config import AppConfig


def create_document_source(config: AppConfig) -> DocumentSource:
    """Create the document source for the configured vault.

    Args:
        config: Application configuration.

    Returns:
        DocumentSource implementation.
    """
    return LocalVaultDocumentSource(config.vault_path, suffix=config.document_suffix)
