"""Result envelope returned by :class:`~bytectl.services.bitops.BitOpsService`.

Every service call yields a :class:`ServiceResult`; the output layer
renders nothing else.  A byte operation puts one view per operand in
``data`` plus a ``result`` view, and ``value`` reads the signed result
back out of it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one byte operation.

    ``warnings`` hold non-fatal notes such as wrapped operands or shift
    counts outside 0..7; ``error`` is set only when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    @property
    def value(self) -> int | None:
        """Signed result byte, or None for failures and results without one."""
        view = self.data.get("result")
        if isinstance(view, dict) and isinstance(view.get("signed"), int):
            return view["signed"]
        return None
