"""Command group: byte shifts (right, left, unsigned-right)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytectl.commands._base import ByteGroup
from bytectl.commands._params import BYTE, COUNT

if TYPE_CHECKING:
    from bytectl.commands._context import AppContext

_SHIFT_EXAMPLES = """\
  bytectl shift right -128 1
  bytectl shift left 0b00000001 3
  bytectl shift unsigned-right 0x80 1
  bytectl --shift-mode mask3 shift left 1 9"""


@click.group(cls=ByteGroup, examples=_SHIFT_EXAMPLES)
@click.pass_obj
def shift(app: AppContext) -> None:
    """Shift the 8-bit pattern of a byte by N positions."""


@shift.command(
    examples="""\
  bytectl shift right -128 1
  bytectl shift right 0b0111_0000 4
  bytectl --json shift right 0xf0 2"""
)
@click.argument("x", type=BYTE)
@click.argument("n", type=COUNT)
@click.pass_obj
def right(app: AppContext, x: int, n: int) -> None:
    """Arithmetic right shift: the sign bit fills the vacated bits."""
    app.emit(app.service.shift_right(x, n))


@shift.command(
    examples="""\
  bytectl shift left 1 1
  bytectl shift left 0b0100_0000 1
  bytectl -q shift left 3 2"""
)
@click.argument("x", type=BYTE)
@click.argument("n", type=COUNT)
@click.pass_obj
def left(app: AppContext, x: int, n: int) -> None:
    """Left shift: zeros fill the low bits, overflow bits are dropped."""
    app.emit(app.service.shift_left(x, n))


@shift.command(
    "unsigned-right",
    examples="""\
  bytectl shift unsigned-right -128 1
  bytectl shift unsigned-right 0xff 4""",
)
@click.argument("x", type=BYTE)
@click.argument("n", type=COUNT)
@click.pass_obj
def unsigned_right(app: AppContext, x: int, n: int) -> None:
    """Logical right shift: zeros fill the vacated bits regardless of sign."""
    app.emit(app.service.unsigned_shift_right(x, n))
