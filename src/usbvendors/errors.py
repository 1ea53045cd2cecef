"""Error types raised by the lookup engine.

Only a missing or unreadable source registry is fatal. Malformed lines are
skipped by the parser and lookup misses are plain return values, so neither
appears here.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    SOURCE_UNAVAILABLE = "SOURCE_UNAVAILABLE"


class UsbIdsError(Exception):
    """Raised when the registry cannot be constructed."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
