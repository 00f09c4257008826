from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from hw_command_server.config import AppConfig
from hw_command_server.errors import SelectionCancelled
from hw_command_server.host import Host
from hw_command_server.sources import LocalVaultDocumentSource


POST_TEMPLATE = (
    '<shreddit-post post-title="{title}" permalink="{permalink}" '
    'created-timestamp="{created}"></shreddit-post>'
)


def make_post(title="Hello", permalink="/r/test/comments/abc123/hello/", created="2024-06-18T16:45:00Z"):
    return POST_TEMPLATE.format(title=title, permalink=permalink, created=created)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class MemoryClipboard:
    def __init__(self, text: str = "") -> None:
        self.text = text

    def read_text(self) -> str:
        return self.text

    def write_text(self, text: str) -> None:
        self.text = text


class RecordingEditor:
    def __init__(self) -> None:
        self.inserted: List[str] = []

    def insert_at_cursor(self, text: str) -> None:
        self.inserted.append(text)


class ScriptedChooser:
    """Picks options by label; a None pick cancels."""

    def __init__(self, *picks: Optional[str]) -> None:
        self.picks = list(picks)
        self.offered: List[List[str]] = []

    def choose(self, options: Sequence, *, labels: Sequence[str], placeholder: str):
        self.offered.append(list(labels))
        pick = self.picks.pop(0)
        if pick is None:
            raise SelectionCancelled()
        return options[list(labels).index(pick)]


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def config(vault: Path) -> AppConfig:
    return AppConfig(vault_path=vault, _env_file=None)


@pytest.fixture
def source(vault: Path) -> LocalVaultDocumentSource:
    return LocalVaultDocumentSource(vault)


@pytest.fixture
def make_host(source):
    def _make(*picks, clipboard: str = "", editor: bool = False) -> Host:
        return Host(
            documents=source,
            chooser=ScriptedChooser(*picks),
            notifier=RecordingNotifier(),
            clipboard=MemoryClipboard(clipboard),
            editor=RecordingEditor() if editor else None,
        )

    return _make
