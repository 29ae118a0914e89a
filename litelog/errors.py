"""Error types raised by the logger."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(str, Enum):
    """Tag identifying which step of a logging call failed."""

    CONFIGURATION = "configuration"
    DIRECTORY_CREATION = "directory_creation"
    ROTATION = "rotation"
    SERIALIZATION = "serialization"
    WRITE = "write"


class LiteLogError(RuntimeError):
    """Base class for every failure surfaced by :class:`~litelog.LiteLogger`.

    ``kind`` lets callers branch on the failing step without matching on the
    subclass. The underlying exception, when there is one, is chained through
    ``__cause__``.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigurationError(LiteLogError):
    """Raised when the log directory or target file name is unusable."""

    kind = ErrorKind.CONFIGURATION


class DirectoryCreationError(LiteLogError):
    """Raised when on-demand creation of the log directory fails."""

    kind = ErrorKind.DIRECTORY_CREATION


class RotationError(LiteLogError):
    """Raised when an oversized log file cannot be renamed."""

    kind = ErrorKind.ROTATION


class SerializationError(LiteLogError):
    """Raised when a log entry cannot be encoded as a JSON line."""

    kind = ErrorKind.SERIALIZATION


class WriteError(LiteLogError):
    """Raised when the append to the log file fails."""

    kind = ErrorKind.WRITE


__all__ = [
    "ConfigurationError",
    "DirectoryCreationError",
    "ErrorKind",
    "LiteLogError",
    "RotationError",
    "SerializationError",
    "WriteError",
]
