"""Tests for CommandHistory."""

from __future__ import annotations

import pytest

from addrctl.domain.history import DEFAULT_MAX_ENTRIES, CommandHistory


class TestCommandHistory:
    def test_default_bound(self) -> None:
        assert CommandHistory().max_entries == DEFAULT_MAX_ENTRIES

    def test_append_order(self) -> None:
        history = CommandHistory()
        history.add("list")
        history.add("delete 1")
        assert history.commands == ("list", "delete 1")

    def test_oldest_dropped_when_full(self) -> None:
        history = CommandHistory(["a", "b"], max_entries=2)
        history.add("c")
        assert history.commands == ("b", "c")

    def test_initial_entries_truncated(self) -> None:
        assert CommandHistory(["a", "b", "c"], max_entries=2).commands == ("b", "c")

    def test_copy_is_independent(self) -> None:
        history = CommandHistory(["a"])
        clone = history.copy()
        clone.add("b")
        assert len(history) == 1
        assert clone.max_entries == history.max_entries

    def test_invalid_bound(self) -> None:
        with pytest.raises(ValueError):
            CommandHistory(max_entries=0)

    def test_max_entries_kept_when_empty(self) -> None:
        history = CommandHistory(max_entries=3)
        assert history.max_entries == 3
        assert history.copy().max_entries == 3
