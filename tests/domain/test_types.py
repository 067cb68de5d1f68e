"""Tests for ByteOp and ShiftMode enums."""

from bytectl.domain.types import ByteOp, ShiftMode


class TestByteOp:
    def test_values(self) -> None:
        assert [op.value for op in ByteOp] == [
            "shift_right",
            "shift_left",
            "unsigned_shift_right",
            "and",
            "or",
        ]

    def test_is_shift(self) -> None:
        assert ByteOp.SHIFT_RIGHT.is_shift
        assert ByteOp.SHIFT_LEFT.is_shift
        assert ByteOp.UNSIGNED_SHIFT_RIGHT.is_shift
        assert not ByteOp.AND.is_shift
        assert not ByteOp.OR.is_shift

    def test_lookup_by_value(self) -> None:
        assert ByteOp("and") is ByteOp.AND


class TestShiftMode:
    def test_masks(self) -> None:
        assert ShiftMode.WRAP.mask == 0x1F
        assert ShiftMode.MASK3.mask == 0x07

    def test_str_value(self) -> None:
        assert str(ShiftMode.WRAP) == "wrap"
        assert ShiftMode("mask3") is ShiftMode.MASK3
