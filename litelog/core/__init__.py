"""Entry encoding and rotation primitives."""

from .entry import LogEntry, encode_message
from .rotation import needs_rotation, rotate_file, rotated_name

__all__ = [
    "LogEntry",
    "encode_message",
    "needs_rotation",
    "rotate_file",
    "rotated_name",
]
