"""Tests for AddrSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from addrctl.config.settings import AddrSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ADDRCTL_CONFIG", "ADDRCTL_VERBOSE", "ADDRCTL_HISTORY__MAX_ENTRIES"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = AddrSettings.from_cli(data_root=tmp_path)
        assert settings.data_root == tmp_path
        assert settings.config_path is None
        assert settings.verbose is False
        assert settings.no_interact is False
        assert settings.history.max_entries == 100
        assert settings.address_book_path == tmp_path / "data" / "addressbook.json"
        assert settings.history_path == tmp_path / "data" / "commandhistory.json"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = AddrSettings.from_cli(data_root=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "addrctl.toml").write_text(
            '[storage]\naddress_book_file = "book.json"\nseed_sample_data = false\n'
        )
        settings = AddrSettings.from_cli(data_root=tmp_path)
        assert settings.address_book_path == tmp_path / "book.json"
        assert settings.storage.seed_sample_data is False
        assert settings.history.max_entries == 100  # default preserved

    def test_data_root_from_config_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "addrctl.toml").write_text("")
        child = tmp_path / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = AddrSettings.from_cli()
        assert settings.data_root == tmp_path
        assert settings.config_path == tmp_path / "addrctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text("[history]\nmax_entries = 3\n")
        settings = AddrSettings.from_cli(config_path=str(config), data_root=tmp_path)
        assert settings.history.max_entries == 3

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "addrctl.toml").write_text("[storage\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            AddrSettings.from_cli(data_root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "addrctl.toml").write_text("[history]\nmax_entries = 3\n")
        monkeypatch.setenv("ADDRCTL_HISTORY__MAX_ENTRIES", "7")
        assert AddrSettings.from_cli(data_root=tmp_path).history.max_entries == 7

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ADDRCTL_VERBOSE", "false")
        assert AddrSettings.from_cli(data_root=tmp_path, verbose=True).verbose is True
