"""Byte commands attached to the root group.

Command modules import the service layer lazily, so they are only loaded
when :func:`register_commands` runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach ``shift`` (right, left, unsigned-right), ``and``, ``or``, ``show``, and ``apply``."""
    from bytectl.commands.apply import apply
    from bytectl.commands.logic import and_cmd, or_cmd
    from bytectl.commands.shift import shift
    from bytectl.commands.show import show

    for command in (shift, and_cmd, or_cmd, show, apply):
        cli.add_command(command)
