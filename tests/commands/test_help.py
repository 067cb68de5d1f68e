"""Help text for each byte command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from bytectl.cli import cli


@pytest.mark.parametrize(
    "path,words",
    [
        ("shift", ["right", "left", "unsigned-right"]),
        ("shift right", ["X", "N", "sign bit"]),
        ("shift left", ["X", "N"]),
        ("shift unsigned-right", ["X", "N", "zeros fill"]),
        ("and", ["X", "Y", "AND"]),
        ("or", ["X", "Y", "OR"]),
        ("show", ["VALUE"]),
        ("apply", ["OP", "A", "B", "shift count"]),
    ],
    ids=lambda value: value.replace(" ", "_") if isinstance(value, str) else None,
)
def test_help_mentions(cli_runner: CliRunner, path: str, words: list[str]) -> None:
    result = cli_runner.invoke(cli, [*path.split(), "--help"])
    assert result.exit_code == 0
    missing = [word for word in words if word not in result.output]
    assert not missing, result.output


def test_root_help_lists_byte_flags(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for flag in ("--shift-mode", "--strict", "--log-json"):
        assert flag in result.output
