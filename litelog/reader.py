"""Helpers for consuming JSON-Lines log files."""
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List

from .core.rotation import ROTATED_SUFFIX


def iter_entries(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield each entry of a log file, parsing it line by line."""

    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(f"{path}:{lineno}: invalid JSON log line ({exc.msg})") from exc
            if not isinstance(entry, dict):
                raise ValueError(f"{path}:{lineno}: log line is not a JSON object")
            yield entry


def rotated_files(directory: Path, file: str) -> List[Path]:
    """Return the rotated siblings of ``file`` in ``directory``, oldest first."""

    directory = Path(directory)
    stem = Path(file).stem
    pattern = re.compile(rf"^{re.escape(stem)}_(\d+)_(\d+){re.escape(ROTATED_SUFFIX)}$")

    found = []
    for candidate in directory.iterdir():
        match = pattern.match(candidate.name)
        if match and candidate.is_file():
            found.append(((int(match.group(1)), int(match.group(2))), candidate))
    return [path for _, path in sorted(found)]


__all__ = ["iter_entries", "rotated_files"]
