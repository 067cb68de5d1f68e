"""Click parameter types for byte operands and shift counts."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from bytectl.domain.bytes import to_byte
from bytectl.domain.notation import parse_byte, parse_count


class _LiteralType(click.ParamType):
    """Converts a literal with *parse*; a ``ValueError`` is a usage error."""

    def __init__(self, name: str, parse: Callable[[str], int]) -> None:
        self.name = name
        self._parse = parse

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return self._coerce(value)
        try:
            return self._parse(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)

    def _coerce(self, value: int) -> int:
        return value


class ByteParamType(_LiteralType):
    """Decimal, ``0x``, ``0b``, or ``0o`` literals in -128..255, as a signed byte."""

    def __init__(self) -> None:
        super().__init__("byte", parse_byte)

    def _coerce(self, value: int) -> int:
        return to_byte(value)


class CountParamType(_LiteralType):
    """Integer literals of any size or sign, kept as typed."""

    def __init__(self) -> None:
        super().__init__("count", parse_count)


BYTE = ByteParamType()
COUNT = CountParamType()
