"""Resolved bytectl settings.

A single frozen :class:`BytectlSettings` answers two questions for every
invocation: how results are printed (``--json``, ``-q``, ``-v``,
``--log-json``) and how bytes are treated (``[ops]``, ``[display]``).

Sources, strongest first: CLI flags, ``BYTECTL_*`` environment variables
(``BYTECTL_OPS__SHIFT_MODE=mask3``), the ``bytectl.toml`` in effect, and
the model defaults.  Sections merge field by field, so ``--shift-mode``
leaves ``[ops] warn_shift_range`` from the file untouched.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from bytectl.config.discovery import find_config
from bytectl.config.models import DisplayConfig, OpsConfig

# File chosen by ``from_cli`` for the settings object under construction.
_active_file: ContextVar[Path | None] = ContextVar("bytectl_active_file", default=None)


class BytectlSettings(BaseSettings):
    """Output flags plus the ``[ops]`` and ``[display]`` sections."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="BYTECTL_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    ops: OpsConfig = Field(default_factory=OpsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlConfigSettingsSource(settings_cls, toml_file=_active_file.get())
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        shift_mode: str | None = None,
        strict: bool | None = None,
        **flags: Any,
    ) -> BytectlSettings:
        """Build settings for one invocation.

        An explicit *config_path* that does not exist means "no file";
        without one, ``bytectl.toml`` is searched for from *start*.  A
        non-None *shift_mode* or *strict* overrides that one ``[ops]`` field.
        """
        if config_path:
            explicit = Path(config_path)
            source = explicit if explicit.is_file() else None
        else:
            source = find_config(start)

        ops = {"shift_mode": shift_mode, "strict": strict}
        ops = {key: value for key, value in ops.items() if value is not None}
        if ops:
            flags["ops"] = ops

        token = _active_file.set(source)
        try:
            return cls(config_path=source, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {source}: {exc}") from exc
        finally:
            _active_file.reset(token)
