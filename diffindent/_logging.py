"""
Diagnostics for scanners and the formatter stay silent until a caller asks.

Each public entry point takes `logger=` and `log=` and hands both to
`resolve_logger`; whatever comes back accepts the usual logging calls.
"""
from __future__ import annotations

import logging


class NoopLogger:
    """Stand-in that accepts logging calls and drops them."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_default_handler(lg: logging.Logger) -> None:
    # No handler of our own; records reach whatever the root has configured.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Pick the logger a diffindent call writes to.

    An explicit `logger` wins. With `enabled` set, the named stdlib logger
    (default "diffindent") is used at `level`. Otherwise diagnostics go to
    a NoopLogger.
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name or "diffindent")
    lg.setLevel(level)
    _ensure_default_handler(lg)
    return lg
