"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, bytectl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from bytectl.domain.types import ShiftMode


class OpsConfig(BaseModel):
    """[ops] section."""

    model_config = {"frozen": True}

    shift_mode: ShiftMode = ShiftMode.WRAP
    warn_shift_range: bool = True
    strict: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    group_nibbles: bool = False
