"""Tests for the Rich Console factory and theme."""

from io import StringIO

from artindex.output.console import ART_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_emoji_codes_left_alone(self) -> None:
        console = create_console()
        console.print("tag :rocket:")
        assert ":rocket:" in get_output(console)


class TestTheme:
    def test_theme_has_core_styles(self) -> None:
        for name in ("art.error", "art.op", "art.heading", "art.key"):
            assert name in ART_THEME.styles
