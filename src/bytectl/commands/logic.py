"""Commands: bitwise AND and OR of two bytes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytectl.commands._base import ByteCommand
from bytectl.commands._params import BYTE

if TYPE_CHECKING:
    from bytectl.commands._context import AppContext


@click.command(
    "and",
    cls=ByteCommand,
    examples="""\
  bytectl and 0b11001100 0b10101010
  bytectl and -1 0x0f
  bytectl --json and 0xcc 0xaa""",
)
@click.argument("x", type=BYTE)
@click.argument("y", type=BYTE)
@click.pass_obj
def and_cmd(app: AppContext, x: int, y: int) -> None:
    """Bitwise AND of two bytes."""
    app.emit(app.service.and_(x, y))


@click.command(
    "or",
    cls=ByteCommand,
    examples="""\
  bytectl or 0b11001100 0b00110011
  bytectl or -128 1
  bytectl -q or 0x0f 0xf0""",
)
@click.argument("x", type=BYTE)
@click.argument("y", type=BYTE)
@click.pass_obj
def or_cmd(app: AppContext, x: int, y: int) -> None:
    """Bitwise OR of two bytes."""
    app.emit(app.service.or_(x, y))
