"""Diagnostics for bytectl, always on stderr.

stdout carries only results, so every log line goes to stderr, rendered
by structlog for both structlog events and stdlib ``logging`` records.
Lines carry the active shift mode, and while an operation is being
evaluated also its name and operands (see :func:`operation_context`).
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, bound_contextvars, clear_contextvars
from structlog.typing import Processor

PACKAGE_LOGGER = "bytectl"


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _stderr_handler(log_json: bool) -> logging.Handler:
    final: Processor
    if log_json:
        final = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        final = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, final],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    shift_mode: str | None = None,
) -> None:
    """Route all logging to one stderr handler.

    ``bytectl.*`` loggers emit DEBUG when *verbose*, otherwise WARNING and
    up; third-party loggers stay at WARNING.  Calling again replaces the
    handler and the bound *shift_mode* rather than adding to them.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    clear_contextvars()
    if shift_mode is not None:
        bind_contextvars(shift_mode=shift_mode)


def operation_context(op: str, **operands: Any) -> AbstractContextManager[None]:
    """Bind *op* and its operands to every log line inside the ``with`` block."""
    return bound_contextvars(op=op, **operands)
