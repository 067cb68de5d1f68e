"""Tests for the eager --examples flag."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from bytectl.cli import cli


@pytest.mark.parametrize(
    "path,snippet",
    [
        ("shift", "--shift-mode mask3"),
        ("shift right", "bytectl shift right -128 1"),
        ("shift left", "bytectl shift left 1 1"),
        ("shift unsigned-right", "bytectl shift unsigned-right"),
        ("and", "bytectl and 0b11001100"),
        ("or", "bytectl or -128 1"),
        ("show", "bytectl show 0xff"),
        ("apply", "bytectl apply shift_right"),
    ],
)
def test_examples_printed(cli_runner: CliRunner, path: str, snippet: str) -> None:
    result = cli_runner.invoke(cli, [*path.split(), "--examples"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0].endswith(f"{path}':")
    assert snippet in result.output


@pytest.mark.parametrize("path", ["shift", "shift unsigned-right", "or", "show", "apply"])
def test_flag_listed_in_help(cli_runner: CliRunner, path: str) -> None:
    result = cli_runner.invoke(cli, [*path.split(), "--help"])
    assert "--examples" in result.output


def test_operands_not_required(cli_runner: CliRunner) -> None:
    # X and N are missing; the eager flag exits before they are checked.
    result = cli_runner.invoke(cli, ["shift", "left", "--examples"])
    assert result.exit_code == 0


def test_flag_after_negative_operand(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["shift", "right", "-128", "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
