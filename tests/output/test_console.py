"""Tests for Rich Console factory and theme."""

from __future__ import annotations

from io import StringIO

from addrctl.output.console import ADDR_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[addr.error]hello[/addr.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_addr_styles_defined(self) -> None:
        for name in ("addr.ok", "addr.error", "addr.prompt", "addr.index", "addr.tag"):
            assert name in ADDR_THEME.styles
