"""Theme and off-screen console for byte rendering.

Renderers draw onto a console backed by an in-memory buffer and hand the
text back to the CLI, which picks the stream.  Colour codes only appear
when Rich decides the buffer is a terminal, so pipes and tests get plain
text.
"""

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 100

BYTE_THEME = Theme(
    {
        "byte.ok": "bold green",
        "byte.error": "bold red",
        "byte.warning": "bold yellow",
        "byte.op": "bold cyan",
        "byte.key": "dim",
        "byte.bits": "bold",
        "byte.hex": "magenta",
        "byte.role.x": "blue",
        "byte.role.y": "blue",
        "byte.role.n": "yellow",
        "byte.role.result": "bold green",
    }
)


def style_for_role(role: str) -> str:
    """Theme style for an operand row (``x``, ``y``, ``n``, ``result``), or ``""``."""
    name = f"byte.role.{role}"
    return name if name in BYTE_THEME.styles else ""


def drawn(
    draw: Callable[[Console], None],
    *,
    width: int = DEFAULT_WIDTH,
    no_color: bool = False,
) -> str:
    """Run *draw* against a fresh buffered console and return what it printed."""
    buffer = StringIO()
    console = Console(
        file=buffer,
        theme=BYTE_THEME,
        width=width,
        no_color=no_color,
        highlight=False,
    )
    draw(console)
    return buffer.getvalue().rstrip("\n")
