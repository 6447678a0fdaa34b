# src/winstate/cli.py
"""CLI for inspecting and resetting stored window state."""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from argparse import ArgumentParser
from pathlib import Path

from winstate.config import (
    DEFAULT_FILE,
    StateConfig,
    default_state_dir,
    get_storage_path,
)
from winstate.geometry import Rect, StaticDisplays
from winstate.record import record_to_json
from winstate.state import StateStore

_DISPLAY_RE = re.compile(r"(?P<w>\d+)x(?P<h>\d+)(?:(?P<x>[+-]\d+)(?P<y>[+-]\d+))?")


def _setup_logging() -> None:
    """Configure logging based on WINSTATE_DEBUG environment variable."""
    level_str = os.environ.get("WINSTATE_DEBUG", "").upper()
    if level_str in ("1", "TRUE", "INFO"):
        level = logging.INFO
    elif level_str == "DEBUG":
        level = logging.DEBUG
    else:
        return  # No logging setup if not enabled

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def parse_display(geometry: str) -> Rect:
    """Parse an X11-style geometry such as ``1920x1080+0+0``."""
    match = _DISPLAY_RE.fullmatch(geometry)
    if not match:
        raise ValueError(f"Invalid display geometry: {geometry!r} (expected WxH+X+Y)")
    width, height = int(match["w"]), int(match["h"])
    if width <= 0 or height <= 0:
        raise ValueError(f"Display size must be positive: {geometry!r}")
    return Rect(int(match["x"] or 0), int(match["y"] or 0), width, height)


def _print_record(data: dict[str, object]) -> None:
    print(json.dumps(data, indent=2))


def main(args: list[str] | None = None) -> int:
    parser = ArgumentParser(description="Inspect stored window placement state.")
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Directory holding the state file (default: platform user-data dir)",
    )
    parser.add_argument(
        "--file",
        default=DEFAULT_FILE,
        help=f"State file name (default: {DEFAULT_FILE})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    show = subparsers.add_parser(
        "show", help="Print the validated record, with defaults applied"
    )
    show.add_argument(
        "--display",
        "-d",
        action="append",
        help="Also fit the record to display geometry WxH+X+Y; repeatable",
    )
    check = subparsers.add_parser(
        "check", help="Print the record a session would restore on these displays"
    )
    check.add_argument(
        "--display",
        "-d",
        action="append",
        required=True,
        help="Display geometry WxH+X+Y; repeat for each display",
    )
    subparsers.add_parser("reset", help="Delete the stored record")

    parsed = parser.parse_args(args)
    _setup_logging()

    config = StateConfig(
        file=parsed.file,
        path=parsed.path if parsed.path is not None else default_state_dir(),
    )
    path = get_storage_path(config)

    if parsed.command in ("show", "check"):
        displays: StaticDisplays | None = None
        if parsed.display:
            try:
                displays = StaticDisplays([parse_display(d) for d in parsed.display])
            except ValueError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
        store = StateStore(config, displays)
        _print_record(record_to_json(store.record))
        return 0

    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Removed {path}")
    return 0


def cli_main() -> None:
    sys.exit(main())
