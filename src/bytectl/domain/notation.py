"""Byte literal parsing and display formatting.

Literals accept an optional sign and the ``0x`` / ``0b`` / ``0o`` prefixes.
Values 128..255 are bit patterns and are reinterpreted as signed, so
``0xFF`` and ``-1`` name the same byte.
"""

from __future__ import annotations

from typing import Any

from bytectl.domain.bytes import BYTE_BITS, BYTE_MASK, BYTE_MIN, to_byte, to_unsigned


def parse_byte(text: str) -> int:
    """Parse a byte literal into a signed byte.

    Raises:
        ValueError: If *text* is not an integer literal or lies outside
            -128..255.

    Examples:
        >>> parse_byte("0b1000_0000")
        -128
        >>> parse_byte("0xff")
        -1
        >>> parse_byte("-3")
        -3
    """
    cleaned = text.strip()
    try:
        value = int(cleaned, 0)
    except ValueError:
        msg = f"Not a byte literal: {text!r}"
        raise ValueError(msg) from None
    if not BYTE_MIN <= value <= BYTE_MASK:
        msg = f"Byte literal out of range (-128..255): {text!r}"
        raise ValueError(msg)
    return to_byte(value)


def parse_count(text: str) -> int:
    """Parse a shift count: any integer literal, taken at face value.

    Unlike :func:`parse_byte` there is no range check and no
    reinterpretation, so ``"200"`` stays 200.  Reducing the count is the
    job of :class:`~bytectl.domain.types.ShiftMode`.
    """
    try:
        return int(text.strip(), 0)
    except ValueError:
        msg = f"Not a shift count: {text!r}"
        raise ValueError(msg) from None


def format_bits(value: int, *, group_nibbles: bool = False) -> str:
    """MSB-first bit string of the byte pattern of *value*."""
    bits = format(to_unsigned(value), f"0{BYTE_BITS}b")
    if group_nibbles:
        return f"{bits[:4]} {bits[4:]}"
    return bits


def format_hex(value: int) -> str:
    return f"0x{to_unsigned(value):02x}"


def describe(value: int, *, group_nibbles: bool = False) -> dict[str, Any]:
    """Signed, unsigned, hex, and bit-string views of one byte."""
    return {
        "signed": to_byte(value),
        "unsigned": to_unsigned(value),
        "hex": format_hex(value),
        "bits": format_bits(value, group_nibbles=group_nibbles),
    }
