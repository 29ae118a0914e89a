"""Command line interface for appending a single log entry."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import LoggerConfig
from .errors import LiteLogError
from .logger import LiteLogger

LOGGER = logging.getLogger(__name__)


def _json_argument(parser: argparse.ArgumentParser, option: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        parser.error(f"{option} is not valid JSON: {exc.msg}")


def build_logger(config: LoggerConfig) -> LiteLogger:
    return LiteLogger(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="litelog",
        description="Append a JSON log entry to a file, rotating it when oversized",
    )
    parser.add_argument("file", help="Log file name inside the log directory")
    parser.add_argument("category", help="Entry category, e.g. 'auth' or 'error'")
    parser.add_argument("message", help="Entry message")
    parser.add_argument("--dir", dest="log_dir", help="Log directory (default: $LITELOG_DIR)")
    parser.add_argument(
        "--max-bytes",
        type=int,
        dest="max_file_size",
        help="Rotate once the file reaches this size (default: $LITELOG_MAX_FILE_SIZE or 10 MiB)",
    )
    parser.add_argument(
        "--create-dir",
        action="store_true",
        default=None,
        help="Create the log directory when it does not exist",
    )
    parser.add_argument("--context", help="JSON object with extra entry data")
    parser.add_argument(
        "--ip",
        dest="client_origin",
        help="Client origin to record; enables the 'ip' field",
    )
    parser.add_argument(
        "--json-message",
        action="store_true",
        help="Parse MESSAGE as JSON before logging it",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug output")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    context: Dict[str, Any] = {}
    if args.context:
        context = _json_argument(parser, "--context", args.context)
        if not isinstance(context, dict):
            parser.error("--context must be a JSON object")

    message: Any = args.message
    if args.json_message:
        message = _json_argument(parser, "--json-message", args.message)

    try:
        config = LoggerConfig.from_env().with_overrides(
            log_dir=Path(args.log_dir) if args.log_dir else None,
            max_file_size=args.max_file_size,
            create_dir=args.create_dir,
            track_client_origin=True if args.client_origin else None,
        )
        logger = build_logger(config)
        logger.log(args.file, args.category, message, context, args.client_origin)
    except LiteLogError as exc:
        print(f"litelog: {exc.kind.value}: {exc}", file=sys.stderr)
        return 1

    LOGGER.debug("Appended entry to %s", logger.path_for(args.file))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
