"""Logger configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .errors import ConfigurationError

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
DEFAULT_DIR_MODE = 0o755
ENV_PREFIX = "LITELOG_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class LoggerConfig:
    """Settings owned by a single :class:`~litelog.LiteLogger` instance.

    ``log_dir`` may be left unset here; the logger refuses to write until it
    points at a usable directory. With ``create_dir`` enabled a missing
    directory is created with ``dir_mode`` on the first call.
    """

    log_dir: Optional[Path] = None
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    create_dir: bool = False
    dir_mode: int = DEFAULT_DIR_MODE
    track_client_origin: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.log_dir, str):
            object.__setattr__(self, "log_dir", Path(self.log_dir) if self.log_dir else None)
        if isinstance(self.max_file_size, bool) or not isinstance(self.max_file_size, int):
            raise ConfigurationError(
                f"max_file_size must be an integer, got {self.max_file_size!r}"
            )
        if self.max_file_size <= 0:
            raise ConfigurationError(
                f"max_file_size must be positive, got {self.max_file_size}"
            )

    def with_overrides(self, **changes: Any) -> "LoggerConfig":
        """Return a copy with ``changes`` applied; ``None`` values are ignored."""

        return replace(self, **{key: value for key, value in changes.items() if value is not None})

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        prefix: str = ENV_PREFIX,
    ) -> "LoggerConfig":
        """Build a config from ``<prefix>DIR``, ``<prefix>MAX_FILE_SIZE``,
        ``<prefix>CREATE_DIR`` and ``<prefix>TRACK_CLIENT_ORIGIN``."""

        env = os.environ if environ is None else environ
        values: dict = {}

        log_dir = env.get(f"{prefix}DIR")
        if log_dir:
            values["log_dir"] = Path(log_dir)

        max_size = env.get(f"{prefix}MAX_FILE_SIZE")
        if max_size:
            try:
                values["max_file_size"] = int(max_size)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{prefix}MAX_FILE_SIZE must be an integer, got {max_size!r}"
                ) from exc

        for key, name in (("create_dir", "CREATE_DIR"), ("track_client_origin", "TRACK_CLIENT_ORIGIN")):
            raw = env.get(f"{prefix}{name}")
            if raw is not None:
                values[key] = _parse_flag(f"{prefix}{name}", raw)

        return cls(**values)


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


__all__ = ["DEFAULT_MAX_FILE_SIZE", "LoggerConfig"]
