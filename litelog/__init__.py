"""Minimal JSON-Lines logger with size-based file rotation."""

from .config import DEFAULT_MAX_FILE_SIZE, LoggerConfig
from .core.entry import LogEntry
from .errors import (
    ConfigurationError,
    DirectoryCreationError,
    ErrorKind,
    LiteLogError,
    RotationError,
    SerializationError,
    WriteError,
)
from .logger import LiteLogger
from .reader import iter_entries, rotated_files

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DEFAULT_MAX_FILE_SIZE",
    "DirectoryCreationError",
    "ErrorKind",
    "LiteLogError",
    "LiteLogger",
    "LogEntry",
    "LoggerConfig",
    "RotationError",
    "SerializationError",
    "WriteError",
    "iter_entries",
    "rotated_files",
]
