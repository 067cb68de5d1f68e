"""Tests for the byte theme and buffered drawing."""

from rich.console import Console

from bytectl.output.console import BYTE_THEME, DEFAULT_WIDTH, drawn, style_for_role


class TestDrawn:
    def test_returns_printed_text(self) -> None:
        assert drawn(lambda console: console.print("11000000")) == "11000000"

    def test_trailing_newlines_stripped(self) -> None:
        def draw(console: Console) -> None:
            console.print("x")
            console.print()

        assert drawn(draw) == "x"

    def test_nothing_drawn(self) -> None:
        assert drawn(lambda console: None) == ""

    def test_no_color_drops_markup_styles(self) -> None:
        text = drawn(lambda c: c.print("[byte.error]ERROR[/]"), no_color=True)
        assert text == "ERROR"
        assert "\x1b" not in text

    def test_width(self) -> None:
        widths: list[int] = []
        drawn(lambda console: widths.append(console.width))
        drawn(lambda console: widths.append(console.width), width=40)
        assert widths == [DEFAULT_WIDTH, 40]

    def test_theme_applied(self) -> None:
        text = drawn(lambda c: c.print("[byte.role.n]n[/]"))
        assert text == "n"


class TestStyleForRole:
    def test_operand_rows(self) -> None:
        assert [style_for_role(r) for r in ("x", "y", "n", "result")] == [
            "byte.role.x",
            "byte.role.y",
            "byte.role.n",
            "byte.role.result",
        ]

    def test_unknown_row_unstyled(self) -> None:
        assert style_for_role("mode") == ""


def test_theme_covers_status_styles() -> None:
    for name in ("byte.ok", "byte.error", "byte.warning", "byte.op", "byte.bits", "byte.hex"):
        assert name in BYTE_THEME.styles, name
