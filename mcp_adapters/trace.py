"""
Diagnostic trace capability.

Loader and invoker take a `trace` object instead of reaching for a
global logger. Anything with `info` and `error` methods fits; a stdlib
logging.Logger is the usual choice and the default.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

DEFAULT_LOGGER_NAME = "mcp_adapters.tools"


@runtime_checkable
class TraceLog(Protocol):
    """Minimal logging interface used for diagnostics."""

    def info(self, msg: str) -> None:
        ...

    def error(self, msg: str) -> None:
        ...


def default_trace() -> TraceLog:
    """
    Return the package's tool logger.

    It emits nothing until the application configures logging, since the
    package root logger carries a NullHandler.
    """
    return logging.getLogger(DEFAULT_LOGGER_NAME)
