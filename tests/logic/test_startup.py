"""Tests for loading the initial Model from storage."""

from __future__ import annotations

import logging

import pytest

from addrctl.domain.sample_data import sample_address_book
from addrctl.infrastructure.storage import JsonStorage
from addrctl.logic.startup import load_model
from tests.conftest import make_book


class TestLoadModel:
    def test_missing_file_seeds_samples(self, storage: JsonStorage) -> None:
        model = load_model(storage)
        assert model.address_book == sample_address_book()
        assert len(model.command_history) == 0

    def test_missing_file_without_seeding(self, storage: JsonStorage) -> None:
        assert len(load_model(storage, seed_sample_data=False).address_book) == 0

    def test_existing_file(self, storage: JsonStorage) -> None:
        storage.save_address_book(make_book("Amy Bee"))
        model = load_model(storage)
        assert [p.name for p in model.address_book] == ["Amy Bee"]

    def test_corrupt_book_starts_empty(
        self, storage: JsonStorage, caplog: pytest.LogCaptureFixture
    ) -> None:
        storage.address_book_path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="addrctl"):
            model = load_model(storage)
        assert len(model.address_book) == 0
        assert "empty address book" in caplog.text

    def test_corrupt_history_starts_empty(self, storage: JsonStorage) -> None:
        storage.history_path.write_text('{"commands": 5}', encoding="utf-8")
        assert len(load_model(storage).command_history) == 0

    def test_history_bound_applied(self, storage: JsonStorage) -> None:
        storage.history_path.write_text('{"commands": ["a", "b", "c"]}', encoding="utf-8")
        model = load_model(storage, max_history_entries=2)
        assert model.command_history.commands == ("b", "c")
        assert model.address_book_path == storage.address_book_path
