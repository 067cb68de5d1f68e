"""Command: show the signed, unsigned, hex, and bit views of a byte."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytectl.commands._base import ByteCommand
from bytectl.commands._params import BYTE

if TYPE_CHECKING:
    from bytectl.commands._context import AppContext


@click.command(
    cls=ByteCommand,
    examples="""\
  bytectl show 0xff
  bytectl show -128
  bytectl --json show 0b1010_1010""",
)
@click.argument("value", type=BYTE)
@click.pass_obj
def show(app: AppContext, value: int) -> None:
    """Show every view of a byte literal."""
    app.emit(app.service.describe(value))
