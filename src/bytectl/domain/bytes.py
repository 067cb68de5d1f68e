"""Byte-level bitwise operations over 8-bit signed values.

A byte is a plain ``int``.  Every operand is reduced to its low 8 bits
and reinterpreted as signed two's complement before use, and every result
is reduced the same way, so results always land in -128..127.

INVARIANT: all five operations are total.  They never raise for any int
operand or shift count; out-of-range shift counts are reduced according
to :class:`~bytectl.domain.types.ShiftMode`.
"""

from __future__ import annotations

from collections.abc import Callable

from bytectl.domain.types import ByteOp, ShiftMode

BYTE_BITS = 8
BYTE_MASK = 0xFF
SIGN_BIT = 0x80
BYTE_MIN = -128
BYTE_MAX = 127


def to_byte(value: int) -> int:
    """Reduce *value* to a signed 8-bit integer (-128..127).

    Examples:
        >>> to_byte(255)
        -1
        >>> to_byte(300)
        44
    """
    return ((value + SIGN_BIT) & BYTE_MASK) - SIGN_BIT


def to_unsigned(value: int) -> int:
    """Return the 0..255 bit pattern of *value*."""
    return value & BYTE_MASK


def sign_bit(value: int) -> int:
    return 1 if value & SIGN_BIT else 0


def shift_count(n: int, mode: ShiftMode = ShiftMode.WRAP) -> int:
    """Effective shift count for *n* under *mode* (always non-negative)."""
    return n & mode.mask


def shift_right(x: int, n: int, *, mode: ShiftMode = ShiftMode.WRAP) -> int:
    """Arithmetic right shift: the sign bit fills the vacated high bits."""
    return to_byte(to_byte(x) >> shift_count(n, mode))


def shift_left(x: int, n: int, *, mode: ShiftMode = ShiftMode.WRAP) -> int:
    """Logical left shift: zeros fill the low bits, bits past bit 7 are dropped."""
    return to_byte(to_byte(x) << shift_count(n, mode))


def unsigned_shift_right(x: int, n: int, *, mode: ShiftMode = ShiftMode.WRAP) -> int:
    """Logical right shift: zeros fill the vacated high bits.

    The operand is masked to its unsigned 8-bit pattern before shifting,
    so the sign bit is never propagated.
    """
    return to_byte(to_unsigned(x) >> shift_count(n, mode))


def and_(x: int, y: int) -> int:
    return to_byte(x & y)


def or_(x: int, y: int) -> int:
    return to_byte(x | y)


OPERATIONS: dict[ByteOp, Callable[..., int]] = {
    ByteOp.SHIFT_RIGHT: shift_right,
    ByteOp.SHIFT_LEFT: shift_left,
    ByteOp.UNSIGNED_SHIFT_RIGHT: unsigned_shift_right,
    ByteOp.AND: and_,
    ByteOp.OR: or_,
}
