"""``bytectl`` entry point.

The root group turns its flags into :class:`BytectlSettings`, which also
reads ``bytectl.toml`` and ``BYTECTL_*``.  The shift and logic commands
hang off it.
"""

from __future__ import annotations

from typing import Any

import click

from bytectl import __version__
from bytectl.commands import register_commands
from bytectl.commands._context import AppContext
from bytectl.config.settings import BytectlSettings
from bytectl.domain.types import ShiftMode


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="bytectl")
@click.option("--json", "json_output", is_flag=True, help="Print the result envelope as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print the signed result only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option("-c", "--config", "config_path", default=None, help="Use this bytectl.toml.")
@click.option(
    "--shift-mode",
    type=click.Choice([m.value for m in ShiftMode]),
    default=None,
    help="Reduce shift counts with a 5-bit (wrap) or 3-bit (mask3) mask.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit 1 when a result carries warnings.",
)
@click.pass_context
def cli(ctx: click.Context, **flags: Any) -> None:
    """bytectl: 8-bit shift, AND, and OR on byte literals."""
    ctx.obj = AppContext(BytectlSettings.from_cli(**flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
