"""BitOpsService: evaluates byte operations and reports byte views.

Pipeline: NORMALIZE → COMPUTE → RESPOND

Operands outside -128..255 are wrapped to a byte with a warning; shift
counts are reduced by the configured :class:`ShiftMode`.  Nothing in the
pipeline fails for an int operand; the only error is an unknown
operation name passed to :meth:`BitOpsService.apply`.
"""

from __future__ import annotations

import logging
from typing import Any

from bytectl.config.logging import operation_context
from bytectl.config.models import DisplayConfig, OpsConfig
from bytectl.domain.bytes import BYTE_BITS, BYTE_MASK, BYTE_MIN, OPERATIONS, shift_count, to_byte
from bytectl.domain.notation import describe
from bytectl.domain.types import ByteOp
from bytectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BitOpsService:
    """Runs the five byte operations under one shift mode and display config."""

    def __init__(
        self,
        ops: OpsConfig | None = None,
        display: DisplayConfig | None = None,
    ) -> None:
        self._ops = ops or OpsConfig()
        self._display = display or DisplayConfig()

    @property
    def shift_mode(self) -> str:
        return self._ops.shift_mode.value

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def shift_right(self, x: int, n: int) -> ServiceResult:
        return self._run(ByteOp.SHIFT_RIGHT, x, n)

    def shift_left(self, x: int, n: int) -> ServiceResult:
        return self._run(ByteOp.SHIFT_LEFT, x, n)

    def unsigned_shift_right(self, x: int, n: int) -> ServiceResult:
        return self._run(ByteOp.UNSIGNED_SHIFT_RIGHT, x, n)

    def and_(self, x: int, y: int) -> ServiceResult:
        return self._run(ByteOp.AND, x, y)

    def or_(self, x: int, y: int) -> ServiceResult:
        return self._run(ByteOp.OR, x, y)

    def apply(self, op: ByteOp | str, a: int, b: int) -> ServiceResult:
        """Dispatch to an operation by :class:`ByteOp` or its string value."""
        try:
            byte_op = ByteOp(op)
        except ValueError:
            logger.debug("unknown operation %r", op)
            return ServiceResult.failure(
                "apply",
                "UNKNOWN_OP",
                f"Unknown operation: {op!r}",
                known=[o.value for o in ByteOp],
            )
        return self._run(byte_op, a, b)

    def describe(self, value: int) -> ServiceResult:
        """Report the signed, unsigned, hex, and bit views of one byte."""
        warnings: list[str] = []
        x = self._normalize("value", value, warnings)
        return ServiceResult.success("describe", self._view(x), warnings)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _run(self, op: ByteOp, a: int, b: int) -> ServiceResult:
        warnings: list[str] = []
        data: dict[str, Any]

        # ── NORMALIZE ────────────────────────────────────────
        x = self._normalize("x", a, warnings)
        if op.is_shift:
            applied = shift_count(b, self._ops.shift_mode)
            self._check_shift_count(b, applied, warnings)
        else:
            y = self._normalize("y", b, warnings)

        # ── COMPUTE ──────────────────────────────────────────
        with operation_context(op.value, a=a, b=b):
            if op.is_shift:
                result = OPERATIONS[op](x, b, mode=self._ops.shift_mode)
            else:
                result = OPERATIONS[op](x, y)
            logger.debug("evaluated -> %d (%s)", result, self._view(result)["bits"])
            for warning in warnings:
                logger.debug("warning: %s", warning)

        # ── RESPOND ──────────────────────────────────────────
        if op.is_shift:
            data = {
                "x": self._view(x),
                "n": b,
                "applied_n": applied,
                "mode": self.shift_mode,
                "result": self._view(result),
            }
        else:
            data = {
                "x": self._view(x),
                "y": self._view(y),
                "result": self._view(result),
            }
        return ServiceResult.success(op.value, data, warnings)

    def _normalize(self, name: str, value: int, warnings: list[str]) -> int:
        """Wrap *value* to a byte, warning when it lies outside -128..255."""
        byte = to_byte(value)
        if not BYTE_MIN <= value <= BYTE_MASK:
            warnings.append(f"Operand {name}={value} wrapped to byte {byte}")
        return byte

    def _check_shift_count(self, n: int, applied: int, warnings: list[str]) -> None:
        if not self._ops.warn_shift_range or 0 <= n < BYTE_BITS:
            return
        warnings.append(
            f"Shift count {n} is outside 0..7; applied as {applied} under {self.shift_mode!r} mode"
        )

    def _view(self, value: int) -> dict[str, Any]:
        return describe(value, group_nibbles=self._display.group_nibbles)
