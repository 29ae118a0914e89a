"""Allow ``python -m litelog``."""
from __future__ import annotations

from .cli import main

raise SystemExit(main())
