"""JSON-Lines logger with size-based rotation."""
from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from .config import LoggerConfig
from .core.entry import LogEntry
from .core.rotation import needs_rotation, rotate_file
from .errors import ConfigurationError, DirectoryCreationError, WriteError
from .utils.locking import current_size, locked_append, write_all

LOGGER = logging.getLogger(__name__)

UNKNOWN_ORIGIN = "Unknown"


class LiteLogger:
    """Append structured entries to JSON-Lines files in one directory.

    Every :meth:`log` call runs synchronously: the directory is validated,
    the entry is encoded, then the active file is locked, rotated when it has
    reached ``max_file_size`` and appended to. The size check and the rename
    happen while the exclusive lock is held, so concurrent writers never
    rotate the same file twice.
    """

    def __init__(
        self,
        config: LoggerConfig,
        *,
        clock: Optional[Callable[[], float]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.config = config
        self._clock = clock or time.time
        self._environ = os.environ if environ is None else environ

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def log(
        self,
        file: str,
        category: str,
        message: Any,
        context: Optional[Mapping[str, Any]] = None,
        client_origin: Optional[str] = None,
    ) -> None:
        """Append one entry to ``file`` inside the configured directory."""

        path = self.path_for(file)
        self._ensure_directory(path.parent)

        ip = self._resolve_origin(client_origin) if self.config.track_client_origin else None
        entry = LogEntry.create(category, message, context, ip, now=self._clock())
        line = entry.to_line()

        self._append(path, line)

    def path_for(self, file: str) -> Path:
        """Return the full path of ``file`` inside the log directory."""

        log_dir = self.config.log_dir
        if log_dir is None:
            raise ConfigurationError(
                "Log directory is not set. Configure log_dir before logging."
            )
        name = str(file)
        if not name or name in (".", "..") or os.sep in name or (os.altsep and os.altsep in name):
            raise ConfigurationError(f"Invalid log file name {file!r}", path=log_dir)
        return log_dir / name

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ensure_directory(self, log_dir: Path) -> None:
        if not log_dir.exists():
            if not self.config.create_dir:
                raise ConfigurationError(
                    f"Log directory '{log_dir}' does not exist.", path=log_dir
                )
            try:
                log_dir.mkdir(mode=self.config.dir_mode, parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryCreationError(
                    f"Failed to create log directory '{log_dir}': {exc.strerror or exc}",
                    path=log_dir,
                ) from exc
            LOGGER.debug("Created log directory %s", log_dir)

        if not log_dir.is_dir():
            raise ConfigurationError(
                f"Log directory '{log_dir}' is not a directory.", path=log_dir
            )
        if not os.access(log_dir, os.W_OK | os.X_OK):
            raise ConfigurationError(
                f"Log directory '{log_dir}' is not writable.", path=log_dir
            )

    def _resolve_origin(self, client_origin: Optional[str]) -> str:
        if client_origin:
            return client_origin
        return self._environ.get("REMOTE_ADDR") or UNKNOWN_ORIGIN

    def _append(self, path: Path, line: bytes) -> None:
        try:
            with locked_append(path) as handle:
                if not needs_rotation(current_size(handle), self.config.max_file_size):
                    write_all(handle, line)
                    return
                # RotationError propagates unchanged; the stale handle is
                # released without being written to.
                rotate_file(path, now=self._clock())

            with locked_append(path) as handle:
                write_all(handle, line)
        except OSError as exc:
            raise WriteError(
                f"Failed to write to log file '{path}': {exc.strerror or exc}",
                path=path,
            ) from exc


__all__ = ["LiteLogger", "UNKNOWN_ORIGIN"]
