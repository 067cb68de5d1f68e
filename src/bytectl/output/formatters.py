"""Pick how a byte result is printed: JSON envelope, bare value, or Rich."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bytectl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from bytectl.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False

    @property
    def mode(self) -> str:
        """``json`` beats ``quiet``, which beats the default ``rich``."""
        if self.json_output:
            return "json"
        return "quiet" if self.quiet else "rich"


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Render *result* under *settings*, or ``OutputSettings(json_output=...)``."""
    settings = settings or OutputSettings(json_output=json_output)
    mode = settings.mode
    if mode == "json":
        return result.model_dump_json(indent=2)
    if mode == "quiet":
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
