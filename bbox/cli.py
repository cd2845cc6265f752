"""Command line entry point for evaluating boxes."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import asdict
from pathlib import Path

from bbox import __version__
from bbox.config import LOG_FORMATS, LOG_LEVELS, load_config
from bbox.errors import BoxParseError
from bbox.geometry import Box, Point, format_coord
from bbox.intersection import corner_hits
from bbox.logging import LoggingConfig, configure_logging, shutdown_logging
from bbox.parsing import parse_coord

logger = logging.getLogger(__name__)

BOX_HELP = "top-left x and y, then bottom-right x and y"


def _coord_arg(text: str) -> float:
    try:
        return parse_coord(text)
    except BoxParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_box_argument(parser: argparse.ArgumentParser, dest: str) -> None:
    parser.add_argument(dest, nargs=4, type=_coord_arg, metavar="COORD", help=BOX_HELP)


def _box(coords: Sequence[float]) -> Box:
    x1, y1, x2, y2 = coords
    return Box(Point(x1, y1), Point(x2, y2))


def build_parser() -> argparse.ArgumentParser:
    config = load_config()
    parser = argparse.ArgumentParser(
        prog="bbox",
        description="Evaluate axis-aligned boxes given as top-left and bottom-right corners.",
    )
    parser.add_argument("--version", action="version", version=f"bbox {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help="Root log level.",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help="Console log format.",
    )
    parser.add_argument(
        "--log-file", type=Path, default=config.log_file, help="Append JSON lines here."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    intersects_cmd = commands.add_parser("intersects", help="Test whether two boxes intersect.")
    _add_box_argument(intersects_cmd, "a")
    _add_box_argument(intersects_cmd, "b")
    intersects_cmd.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the boxes do not intersect.",
    )

    describe_cmd = commands.add_parser("describe", help="Print a box and its derived values.")
    _add_box_argument(describe_cmd, "box")
    return parser


def _run_intersects(a: Box, b: Box, *, check: bool) -> int:
    hits = corner_hits(a, b)
    logger.debug(
        "intersects %s %s -> %s",
        a,
        b,
        hits.any,
        extra={"a": str(a), "b": str(b), "corner_hits": asdict(hits)},
    )
    print("true" if hits.any else "false")
    if check and not hits.any:
        return 1
    return 0


def _run_describe(box: Box) -> int:
    print(box)
    print(f"width: {format_coord(box.width)}")
    print(f"height: {format_coord(box.height)}")
    print(f"top_left: {box.top_left}")
    print(f"top_right: {box.top_right}")
    print(f"bottom_left: {box.bottom_left}")
    print(f"bottom_right: {box.bottom_right}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        LoggingConfig(
            level=logging.getLevelNamesMapping()[args.log_level],
            console_json=args.log_format == "json",
            file_path=args.log_file,
        )
    )
    try:
        if args.command == "intersects":
            return _run_intersects(_box(args.a), _box(args.b), check=args.check)
        return _run_describe(_box(args.box))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
