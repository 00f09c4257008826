"""Collaborators provided by the host editing application.

Commands talk to the user and the editor only through these
interfaces, so they can run inside any host (or a test) that supplies
them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, TypeVar

from .document_source import DocumentSource

T = TypeVar("T")


class Chooser(Protocol):
    """Presents labelled options and returns exactly one of them.

    Implementations raise ``SelectionCancelled`` when the user dismisses
    the picker instead of returning a value.
    """

    def choose(self, options: Sequence[T], *, labels: Sequence[str], placeholder: str) -> T: ...


class Notifier(Protocol):
    def notify(self, message: str) -> None: ...


class Clipboard(Protocol):
    def read_text(self) -> str: ...

    def write_text(self, text: str) -> None: ...


class Editor(Protocol):
    def insert_at_cursor(self, text: str) -> None: ...


@dataclass
class Host:
    """Bundle of host collaborators handed to a command.

    ``editor`` is None when no editable view is active.
    """

    documents: DocumentSource
    chooser: Chooser
    notifier: Notifier
    clipboard: Clipboard
    editor: Optional[Editor] = None
