"""Tests for the Rich Console factory and theme."""

from io import StringIO

from datefmt.output.console import DATEFMT_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[df.ok]OK[/df.ok]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "OK" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_status_styles_defined(self) -> None:
        for name in ("df.ok", "df.error", "df.warning", "df.op", "df.key", "df.value"):
            assert name in DATEFMT_THEME.styles
