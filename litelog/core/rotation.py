"""Size-based rotation of the active log file."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import RotationError

LOGGER = logging.getLogger(__name__)

ROTATED_SUFFIX = ".json"


def rotated_name(path: Path, now: float) -> Path:
    """Return the rotation target for ``path``.

    The name is ``<stem>_<seconds>_<milliseconds>.json`` in the same
    directory; the original extension is always replaced by ``.json``.
    """

    path = Path(path)
    stamp = f"{now:.3f}".replace(".", "_")
    return path.with_name(f"{path.stem}_{stamp}{ROTATED_SUFFIX}")


def needs_rotation(size: int, max_file_size: int) -> bool:
    return size >= max_file_size


def rotate_file(path: Path, now: float) -> Path:
    """Rename ``path`` out of the way and return the rotated path.

    The file is hard-linked under the new name and then unlinked, so a
    rotated file that already exists under the computed name is never
    overwritten; the call fails with :class:`RotationError` instead.
    """

    path = Path(path)
    target = rotated_name(path, now)
    try:
        os.link(path, target)
    except FileExistsError as exc:
        raise RotationError(
            f"Failed to rotate log file '{path}' to '{target}': target already exists",
            path=path,
        ) from exc
    except OSError as exc:
        raise RotationError(
            f"Failed to rotate log file '{path}' to '{target}': {exc.strerror or exc}",
            path=path,
        ) from exc

    try:
        os.unlink(path)
    except OSError as exc:
        os.unlink(target)
        raise RotationError(
            f"Failed to rotate log file '{path}' to '{target}': {exc.strerror or exc}",
            path=path,
        ) from exc

    LOGGER.info("Rotated %s to %s", path, target.name)
    return target


__all__ = ["needs_rotation", "rotate_file", "rotated_name"]
