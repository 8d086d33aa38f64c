"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, addrctl.toml only contains
overrides. A fresh data directory needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

# --- addrctl.toml sections ---


class StorageConfig(BaseModel):
    """[storage] section. Relative paths resolve against the data root."""

    model_config = {"frozen": True}

    address_book_file: str = "data/addressbook.json"
    history_file: str = "data/commandhistory.json"
    seed_sample_data: bool = True


class HistoryConfig(BaseModel):
    """[history] section."""

    model_config = {"frozen": True}

    max_entries: int = Field(default=100, ge=1)


class ConfirmationConfig(BaseModel):
    """[confirmation] section — answers accepted at a yes/no prompt."""

    model_config = {"frozen": True}

    yes_tokens: tuple[str, ...] = ("y", "yes")
    no_tokens: tuple[str, ...] = ("n", "no")

    @field_validator("yes_tokens", "no_tokens")
    @classmethod
    def _non_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        cleaned = tuple(t.strip().lower() for t in v if t.strip())
        if not cleaned:
            msg = "at least one token is required"
            raise ValueError(msg)
        return cleaned

