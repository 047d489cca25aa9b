"""
Diagnostics sink used to report recoverable translation problems.
"""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger("i18n-service")


class DiagnosticsSink(Protocol):
    """Receives warnings and errors raised while loading or resolving terms."""

    def warn(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class LoggingDiagnostics:
    """Diagnostics sink that forwards to a standard library logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def warn(self, message: str) -> None:
        self._log.warning(message)

    def error(self, message: str) -> None:
        self._log.error(message)
