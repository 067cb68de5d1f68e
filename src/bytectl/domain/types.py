"""Operation names and shift-count modes."""

from __future__ import annotations

from enum import StrEnum


class ByteOp(StrEnum):
    """The five byte operations."""

    SHIFT_RIGHT = "shift_right"
    SHIFT_LEFT = "shift_left"
    UNSIGNED_SHIFT_RIGHT = "unsigned_shift_right"
    AND = "and"
    OR = "or"

    @property
    def is_shift(self) -> bool:
        return self in _SHIFT_OPS


_SHIFT_OPS = frozenset({ByteOp.SHIFT_RIGHT, ByteOp.SHIFT_LEFT, ByteOp.UNSIGNED_SHIFT_RIGHT})


class ShiftMode(StrEnum):
    """How a shift count is reduced before shifting.

    ``wrap`` keeps the low 5 bits, the count a byte operand gets once
    promoted to a 32-bit int: counts 8..31 push every bit out of the byte
    and 32 behaves like 0.  For ``shift_right`` and ``shift_left`` this
    gives the same byte as shifting the promoted int and truncating.
    ``unsigned_shift_right`` is the exception: it shifts the 8-bit
    pattern, never the sign-extended int, so ``unsigned_shift_right(-1, 8)``
    is 0 where the widened shift would give -1.

    ``mask3`` keeps the low 3 bits so every count lands in 0..7.
    """

    WRAP = "wrap"
    MASK3 = "mask3"

    @property
    def mask(self) -> int:
        return 0x1F if self is ShiftMode.WRAP else 0x07
