"""Log entry model and its JSON-line encoding."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..errors import SerializationError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _dumps(value: Any) -> str:
    # Compact separators; json never escapes "/" and Unicode passes through.
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def encode_message(message: Any) -> str:
    """Return the string stored in the ``message`` field.

    Structured messages (mappings, lists and tuples) are embedded as a JSON
    encoded string rather than a nested object, so the ``message`` field is
    always a string.
    """

    if isinstance(message, str):
        return message
    if isinstance(message, (bytes, bytearray)):
        try:
            return bytes(message).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SerializationError(f"Log message is not valid UTF-8 - {exc}") from exc
    if isinstance(message, (Mapping, list, tuple)):
        try:
            return _dumps(dict(message) if isinstance(message, Mapping) else list(message))
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Failed to encode log message as JSON - {exc}") from exc
    return str(message)


@dataclass
class LogEntry:
    """A single log record, built per call and only persisted as JSON."""

    timestamp: str
    category: str
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    ip: Optional[str] = None

    @classmethod
    def create(
        cls,
        category: str,
        message: Any,
        context: Optional[Mapping[str, Any]] = None,
        ip: Optional[str] = None,
        *,
        now: float,
    ) -> "LogEntry":
        return cls(
            timestamp=datetime.fromtimestamp(now).strftime(TIMESTAMP_FORMAT),
            category=str(category),
            message=encode_message(message),
            context=dict(context or {}),
            ip=ip,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "timestamp": self.timestamp,
            "category": self.category,
            "message": self.message,
        }
        if self.context:
            data["context"] = self.context
        if self.ip is not None:
            data["ip"] = self.ip
        return data

    def to_line(self) -> bytes:
        """Encode the entry as one UTF-8 JSON line ending in ``\\n``."""

        try:
            return (_dumps(self.to_dict()) + "\n").encode("utf-8")
        except (TypeError, ValueError) as exc:
            # UnicodeEncodeError (lone surrogates) is a ValueError subclass.
            raise SerializationError(f"Failed to encode log entry as JSON - {exc}") from exc


__all__ = ["LogEntry", "TIMESTAMP_FORMAT", "encode_message"]
