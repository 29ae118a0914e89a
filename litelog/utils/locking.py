"""Exclusive-lock append helpers for JSON-Lines files."""
from __future__ import annotations

import fcntl
import os
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator


def _is_current(handle: BinaryIO, path: Path) -> bool:
    """Return ``True`` when ``handle`` still refers to the file at ``path``."""

    try:
        on_disk = os.stat(path)
    except FileNotFoundError:
        return False
    opened = os.fstat(handle.fileno())
    return (opened.st_dev, opened.st_ino) == (on_disk.st_dev, on_disk.st_ino)


@contextmanager
def locked_append(path: Path) -> Iterator[BinaryIO]:
    """Open ``path`` for appending and hold an exclusive lock on it.

    Another writer may rename the file while this one waits for the lock. In
    that case the stale handle is dropped and the (fresh) file at ``path`` is
    opened again, so the yielded handle always refers to the active file.
    """

    path = Path(path)
    while True:
        handle = path.open("ab")
        try:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX)
            if _is_current(handle, path):
                break
        except BaseException:
            handle.close()
            raise
        handle.close()

    try:
        yield handle
    finally:
        try:
            fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
        finally:
            handle.close()


def current_size(handle: BinaryIO) -> int:
    return os.fstat(handle.fileno()).st_size


def write_all(handle: BinaryIO, data: bytes) -> None:
    """Write ``data`` in one call and flush it to the OS."""

    written = handle.write(data)
    if written != len(data):
        raise OSError(f"short write: {written} of {len(data)} bytes")
    handle.flush()


__all__ = ["current_size", "locked_append", "write_all"]
