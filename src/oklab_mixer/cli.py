"""Command-line front end.

Usage
-----
$ oklab-mix "#ff0000" "#0000ff" 3
$ python -m oklab_mixer ff0000 0000ff --no-color

Prints the inputs, then one line per gradient step: a truecolor swatch
followed by the step's '#rrggbb'.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import configure_logging
from .gradient import DEFAULT_MIDPOINTS, generate_sequence
from .srgb import Hex, InvalidFormat, format_hex_string, parse_hex_string, split_channels

log = logging.getLogger(__name__)

RESET = "\x1b[0m"


def swatch(hex_: Hex) -> str:
    r, g, b = split_channels(hex_)
    return f"\x1b[48;2;{r};{g};{b}m    {RESET}"


def render(
    colors: List[Hex], *, color: bool = True, out: Optional[TextIO] = None
) -> None:
    for hex_ in colors:
        text = format_hex_string(hex_)
        print(f"{swatch(hex_)} {text}" if color else text, file=out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oklab-mix",
        description="Blends hex colors, converting to and from the OKLAB color space to blend the colors.",
    )
    parser.add_argument("start", help="start color, RRGGBB or #RRGGBB")
    parser.add_argument("end", help="end color, RRGGBB or #RRGGBB")
    parser.add_argument(
        "midpoints",
        nargs="?",
        type=int,
        default=None,
        help=f"number of midpoints (default: {DEFAULT_MIDPOINTS})",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="print hex codes without swatches"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log each blend step"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else None)

    try:
        start = parse_hex_string(args.start)
        end = parse_hex_string(args.end)
    except InvalidFormat as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    midpoints = DEFAULT_MIDPOINTS if args.midpoints is None else args.midpoints
    log.debug("start=%06x end=%06x midpoints=%d", start, end, midpoints)
    try:
        colors = generate_sequence(start, end, midpoints)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Start: {args.start}")
    print(f"End: {args.end}")
    print(f"Midpoints: {midpoints}")

    render(colors, color=not args.no_color)
    return 0


if __name__ == "__main__":
    sys.exit(main())
