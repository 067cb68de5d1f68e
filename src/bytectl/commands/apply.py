"""Command: apply an operation by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytectl.commands._base import ByteCommand
from bytectl.commands._params import BYTE, COUNT

if TYPE_CHECKING:
    from bytectl.commands._context import AppContext


@click.command(
    cls=ByteCommand,
    examples="""\
  bytectl apply shift_right -128 1
  bytectl apply unsigned_shift_right 0x80 1
  bytectl --json apply or 0xcc 0x33""",
)
@click.argument("op")
@click.argument("a", type=BYTE)
@click.argument("b", type=COUNT)
@click.pass_obj
def apply(app: AppContext, op: str, a: int, b: int) -> None:
    """Apply OP (shift_right, shift_left, unsigned_shift_right, and, or) to A and B.

    For shifts, B is the shift count.  B is read as a plain integer;
    an AND or OR operand outside -128..255 is wrapped with a warning.
    """
    app.emit(app.service.apply(op, a, b))
