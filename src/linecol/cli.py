from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .api import to_offset, to_positions
from .errors import LineColumnError
from .scan import Unit


logger = logging.getLogger(__name__)


def _position_arg(value: str) -> tuple[int, int]:
    line, sep, column = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        return int(line), int(column)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COLUMN, got {value!r}") from None


def _read(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).expanduser().read_bytes()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="linecol",
        description="Convert between offsets and 1-based line:column positions",
    )
    ap.add_argument("file", help="Text file to read ('-' for stdin)")
    ap.add_argument("offsets", nargs="*", type=int, help="Offsets to convert to line:column")
    ap.add_argument(
        "-p",
        "--position",
        action="append",
        default=[],
        type=_position_arg,
        metavar="LINE:COLUMN",
        help="Position to convert to an offset (repeatable)",
    )
    ap.add_argument(
        "--unit",
        choices=[u.value for u in Unit],
        default=Unit.BYTE.value,
        help="Offset unit (default: byte)",
    )
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    unit = Unit(args.unit)
    text = _read(args.file)
    logger.debug("read %d bytes from %s", len(text), args.file)

    try:
        positions = to_positions(text, args.offsets, unit=unit)
        offsets = [to_offset(text, line, column, unit=unit) for line, column in args.position]
    except (LineColumnError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        payload = {
            "file": args.file,
            "unit": unit.value,
            "offsets": [
                {"offset": o, "line": line, "column": column}
                for o, (line, column) in zip(args.offsets, positions)
            ],
            "positions": [
                {"line": line, "column": column, "offset": o}
                for (line, column), o in zip(args.position, offsets)
            ],
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for line, column in positions:
            print(f"{line}:{column}")
        for o in offsets:
            print(o)
    return 0
