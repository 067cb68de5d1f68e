"""Shared pytest fixtures for bytectl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray bytectl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes. Tests that need the path can also request ``tmp_path`` directly.
    """
    monkeypatch.delenv("BYTECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Each CLI run reconfigures logging; put levels and handlers back afterwards."""
    loggers = [logging.getLogger(), logging.getLogger("bytectl")]
    saved = [(lg, lg.level, lg.handlers[:]) for lg in loggers]
    yield
    for lg, level, handlers in saved:
        lg.setLevel(level)
        lg.handlers = handlers
    structlog.contextvars.clear_contextvars()

