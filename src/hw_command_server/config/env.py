"""Environment configuration for the HW Command Server.

All settings are read from environment variables prefixed with
``HWCMD_`` (or a local ``.env`` file):

```bash
export HWCMD_VAULT_PATH="~/Documents/Vault"
export HWCMD_DEBUG=true
export HWCMD_DISPLAY_UTC_OFFSET_HOURS=-4
```

They are rendered to the AppConfig class and can be accessed like this:

```python
from hw_command_server.config import load_config
cfg = load_config()
print(cfg.vault_path)
```

The config object is passed explicitly into every command and tool;
nothing in the package reads a process-wide settings object.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _expand_path(p: str | Path | None) -> Path | None:
    """Expand ~ and environment variables in a path-like value."""
    if p is None:
        return None
    if isinstance(p, Path):
        s = str(p)
    else:
        s = p
    return Path(os.path.expanduser(os.path.expandvars(s)))


class AppConfig(BaseSettings):
    """Application configuration settings loaded from environment variables.

    All environment variables are prefixed with HWCMD_ (e.g., HWCMD_DEBUG).
    Paths are automatically expanded to resolve ~ and environment variables.
    """

    # ---- behavior ----
    debug: bool = Field(
        default=False,
        description="Enable debug logging for troubleshooting",
    )

    # ---- document store ----
    vault_path: Path = Field(
        default="~/Notes",
        description="Root directory holding the Markdown documents to sort",
    )
    document_suffix: str = Field(
        default=".md", description="File suffix of documents offered for sorting"
    )

    # ---- post extraction ----
    post_tag: str = Field(
        default="shreddit-post",
        description="Tag name of the post elements in pasted HTML",
    )
    post_base_url: str = Field(
        default="https://www.reddit.com",
        description="Origin prepended to the permalink path of each post",
    )
    display_utc_offset_hours: int = Field(
        default=-4,
        ge=-23,
        le=23,
        description="Fixed offset from UTC applied to post timestamps (no DST)",
    )

    model_config = SettingsConfigDict(
        env_prefix="HWCMD_",
        case_sensitive=False,
        env_file=(".env",),  # will read if present
        env_file_encoding="utf-8",
        frozen=True,
    )

    @field_validator("vault_path", mode="before")
    @classmethod
    def _expand_vault_path(cls, v):
        return _expand_path(v)

    @field_validator("post_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def load_config() -> AppConfig:
    """Load and validate application configuration from environment variables.

    • All variables are prefixed with HWCMD_ (e.g., HWCMD_VAULT_PATH).
    • Missing values fall back to the documented defaults.
    • Paths expand ~ and ${VARS}.
    """
    return AppConfig()
