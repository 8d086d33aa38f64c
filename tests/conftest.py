"""Shared pytest fixtures and test helpers for addrctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from addrctl.config.logging import APP_LOGGER
from addrctl.domain.address_book import AddressBook
from addrctl.domain.history import CommandHistory
from addrctl.domain.model import Model
from addrctl.domain.person import Person
from addrctl.domain.sample_data import sample_address_book
from addrctl.infrastructure.storage import JsonStorage
from addrctl.logic.manager import LogicManager


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore logger state after each test.

    Every CLI invocation calls configure_logging(), which replaces the root
    handlers with one bound to the runner's captured stderr.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger(APP_LOGGER)
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary data directory with no config file in effect.

    This is the single source of truth for the on-disk layout used by
    storage and CLI tests.
    """
    monkeypatch.delenv("ADDRCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data").mkdir()
    return tmp_path


@pytest.fixture
def storage(data_root: Path) -> JsonStorage:
    """JSON storage at the default file locations under ``data_root``."""
    return JsonStorage(
        data_root / "data" / "addressbook.json",
        data_root / "data" / "commandhistory.json",
    )


@pytest.fixture
def typical_model() -> Model:
    """Model holding the six sample persons and an empty history."""
    return Model(sample_address_book(), CommandHistory())


@pytest.fixture
def manager(typical_model: Model, storage: JsonStorage) -> LogicManager:
    """LogicManager over ``typical_model`` saving to ``storage``."""
    return LogicManager(typical_model, storage)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_person(name: str = "Amy Bee", **overrides: object) -> Person:
    """Build a valid Person, overriding any fields given."""
    values: dict[str, object] = {
        "name": name,
        "phone": "85355255",
        "email": "amy@example.com",
        "address": "123, Jurong West Ave 6, #08-111",
    }
    values.update(overrides)
    return Person(**values)  # type: ignore[arg-type]


def make_book(*names: str) -> AddressBook:
    """Address book with one generated person per name."""
    return AddressBook(make_person(n) for n in names)
