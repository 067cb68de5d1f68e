"""Rich rendering of byte results.

A byte operation prints a status line, the shift count and mode when
there is one, and a table with a row per operand plus the result.
``describe`` prints the four views as fields.  Warnings are not rendered
here: the CLI writes them to stderr after the result.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from bytectl.domain.types import ByteOp
from bytectl.output.console import drawn, style_for_role

if TYPE_CHECKING:
    from rich.console import Console

    from bytectl.services.result import ServiceResult

_BYTE_OPS = frozenset(op.value for op in ByteOp)
_VIEW_KEYS = ("signed", "unsigned", "hex", "bits")
_ROW_ROLES = ("x", "y", "result")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as text; plain when Rich sees no terminal."""
    if not result.ok:
        return drawn(lambda console: _print_error(console, result, verbose=verbose))
    if result.op in _BYTE_OPS:
        return drawn(lambda console: _print_byte_op(console, result))
    if result.op == "describe":
        return drawn(lambda console: _print_views(console, result))
    return drawn(lambda console: _print_fields(console, result))


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the signed result, so it can be piped back in."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    if result.value is not None:
        return str(result.value)
    return f"OK: {result.op}"


def _headline(result: ServiceResult) -> Text:
    return Text.assemble(("OK", "byte.ok"), "  ", (result.op, "byte.op"))


def _kv(key: str, value: Any) -> Text:
    style = f"byte.{key}" if key in ("bits", "hex") else ""
    return Text.assemble((f"  {key}: ", "byte.key"), (str(value), style))


def _count_line(data: dict[str, Any]) -> Text:
    n, applied = data["n"], data.get("applied_n", data["n"])
    line = _kv("n", n)
    if applied != n:
        line.append(f" (applied as {applied})", style="byte.warning")
    return line


def _view_table(data: dict[str, Any]) -> Table:
    table = Table(pad_edge=False)
    table.add_column("")
    table.add_column("Signed", justify="right")
    table.add_column("Unsigned", justify="right")
    table.add_column("Hex", style="byte.hex")
    table.add_column("Bits", style="byte.bits", no_wrap=True)
    for role in _ROW_ROLES:
        view = data.get(role)
        if view is None:
            continue
        table.add_row(
            Text(role, style=style_for_role(role)),
            *(str(view[key]) for key in _VIEW_KEYS),
        )
    return table


def _print_byte_op(console: Console, result: ServiceResult) -> None:
    data = result.data
    console.print(_headline(result))
    if "n" in data:
        console.print(_count_line(data))
        console.print(_kv("mode", data.get("mode", "")))
    console.print(_view_table(data))


def _print_views(console: Console, result: ServiceResult) -> None:
    console.print(_headline(result))
    for key in _VIEW_KEYS:
        if key in result.data:
            console.print(_kv(key, result.data[key]))


def _print_fields(console: Console, result: ServiceResult) -> None:
    console.print(_headline(result))
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        console.print(_kv(key, value))


def _print_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    err = result.error
    message = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "byte.error"), "  ", (result.op, "byte.op"), " — ", message)
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))
