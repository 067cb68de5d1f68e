"""Click classes for bytectl commands.

Each command may carry canned ``examples``, shown by an eager
``--examples`` flag before any argument is checked.  Byte commands also
take dash-prefixed tokens as operands, so ``bytectl shift right -128 1``
works without a ``--`` separator.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit()


_EXAMPLES_OPTION = click.Option(
    ["--examples"],
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_examples,
    help="Show usage examples.",
)


class _WithExamples:
    """Adds ``--examples`` to the parameters of any command that has examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params: list[click.Parameter] = super().get_params(ctx)  # type: ignore[misc]
        if self.examples:
            return [*params, _EXAMPLES_OPTION]
        return params


class ByteCommand(_WithExamples, click.Command):
    # "-128" is an operand, not an unknown short option.
    ignore_unknown_options = True


class ByteGroup(_WithExamples, click.Group):
    command_class = ByteCommand
