"""Interactive commands run on behalf of the host application.

Each command reads its input through the host collaborators, reports
its outcome with a notification, and never writes partial output:
whole-operation failures are reported and abort before any write.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

from .config import AppConfig
from .errors import AppError, SelectionCancelled
from .host import Host
from .schemas import WHOLE_DOCUMENT, ExtractPostsInput, SectionChoice
from .sections import list_section_choices
from .tools.notes import sort_section_in_document
from .tools.posts import extract_posts

logger = logging.getLogger(__name__)


class ScriptCommand(ABC):
    """A named command the host can register and trigger."""

    id: str
    name: str
    description: str

    @abstractmethod
    def execute(self, config: AppConfig, host: Host) -> None:
        pass


class RedditPostParserCommand(ScriptCommand):
    id = "reddit-post-parser"
    name = "Paste Subreddit Main Directory"
    description = "Parse Reddit HTML from clipboard and paste formatted posts"

    def execute(self, config: AppConfig, host: Host) -> None:
        html = host.clipboard.read_text()
        if not html:
            host.notifier.notify("Clipboard is empty")
            return

        try:
            result = extract_posts(config, ExtractPostsInput(html=html))
        except AppError as exc:
            logger.error("Reddit parser error: %s", exc.message)
            host.notifier.notify(f"Error parsing Reddit posts: {exc.message}")
            return

        if not result.count:
            host.notifier.notify(result.message)
            return

        output = "\n".join(result.lines)
        if config.debug:
            logger.debug("Reddit parser output:\n%s", output)

        host.clipboard.write_text(output)
        if host.editor is not None:
            host.editor.insert_at_cursor(output)
            host.notifier.notify(f"Parsed and pasted {result.count} Reddit posts")
        else:
            host.notifier.notify(
                f"Parsed {result.count} Reddit posts and copied to clipboard"
            )


class SortTimestampedListCommand(ScriptCommand):
    id = "sort-timestamped-list"
    name = "Sort Timestamped List"
    description = "Sort timestamped entries in a selected note section chronologically"

    def execute(self, config: AppConfig, host: Host) -> None:
        try:
            self._run(config, host)
        except SelectionCancelled:
            if config.debug:
                logger.debug("Sort timestamped list: selection cancelled")
        except AppError as exc:
            logger.error("Sort timestamps error: %s", exc.message)
            host.notifier.notify(f"Error sorting timestamps: {exc.message}")

    def _run(self, config: AppConfig, host: Host) -> None:
        documents = host.documents.list_documents()
        document = host.chooser.choose(
            documents,
            labels=[doc.id for doc in documents],
            placeholder="Select a note to sort timestamps in...",
        )
        if config.debug:
            logger.debug("Selected document: %s", document.id)

        sections = self.load_sections(config, host, document.id)
        choice = host.chooser.choose(
            sections,
            labels=[section.label for section in sections],
            placeholder="Select a section to sort timestamps in...",
        )
        if config.debug:
            logger.debug("Selected section: %s at line %s", choice.label, choice.line)

        host.notifier.notify("Sorting list...")
        result = sort_section_in_document(config, host.documents, document.id, choice)
        host.notifier.notify(result.message)

    def load_sections(self, config: AppConfig, host: Host, document_id: str) -> List[SectionChoice]:
        """Section choices of a document; only the whole document if unreadable."""
        try:
            text = host.documents.read_document(document_id)
        except AppError as exc:
            logger.warning("Error loading sections for %s: %s", document_id, exc.message)
            return [WHOLE_DOCUMENT]
        return list_section_choices(text.split("\n"))


def available_commands() -> List[ScriptCommand]:
    """All commands in registration order."""
    return [RedditPostParserCommand(), SortTimestampedListCommand()]
