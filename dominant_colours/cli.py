"""
dominant_colours.cli
Find the dominant colours in an image and print them as swatches.

Usage:
  dominant-colours PATH [--max-colours N] [--seed S | --random-seed]
                        [--terminal-colours [--max-brightness]] [--no-palette] [--debug]

Modes:
  default            : k-means in Lab, one ANSI-coloured swatch line per colour.
  --terminal-colours : snap colours to the 16-colour terminal palette, listed in
                       table order. Clusters at least 16 colours.
  --no-palette       : print bare hex codes with no escape sequences.

Input:
  PNG, JPEG, GIF, TIFF, BMP, ICO, TGA and PPM. GIFs are sampled across frames.

Exit status:
  0 success, 1 runtime error (missing file, bad image), 2 invalid arguments.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .constants import DEFAULT_MAX_COLOURS, DEFAULT_SEED, SEED_UPPER_BOUND
from .errors import DominantColoursError
from .pipeline import RunConfig, find_dominant_colours
from .render import render_lines
from .utils import debug_log, error, key_value_pairs_to_string

EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1


def positive_int(text: str) -> int:
    """argparse type: integer >= 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {text!r}")
    return value


def seed_int(text: str) -> int:
    """argparse type: unsigned 64-bit integer."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {text!r}")
    if not 0 <= value < SEED_UPPER_BOUND:
        raise argparse.ArgumentTypeError(f"must be in 0..2^64-1: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dominant-colours",
        description="Find the dominant colours in an image.",
    )
    parser.add_argument("path", type=Path, metavar="PATH", help="Path to the image")
    parser.add_argument(
        "--max-colours",
        type=positive_int,
        default=DEFAULT_MAX_COLOURS,
        metavar="MAX-COLOURS",
        help=f"How many colours to find (default: {DEFAULT_MAX_COLOURS})",
    )
    parser.add_argument(
        "--seed",
        type=seed_int,
        default=DEFAULT_SEED,
        metavar="SEED",
        help=f"Seed for the k-means clustering (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="Use a fresh random seed on every run",
    )
    parser.add_argument(
        "--terminal-colours",
        action="store_true",
        help="Snap colours to the 16 standard terminal colours",
    )
    parser.add_argument(
        "--max-brightness",
        action="store_true",
        help="Prefer the bright terminal colours (with --terminal-colours)",
    )
    parser.add_argument(
        "--no-palette",
        action="store_true",
        help="Print hex codes only, without coloured swatches",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Diagnostics on stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> RunConfig:
    """
    Parse CLI arguments into a RunConfig.

    Invalid values make argparse print a usage error and exit with status 2
    before any image is touched.
    """
    args = build_parser().parse_args(argv)
    return RunConfig(
        path=args.path,
        max_colours=args.max_colours,
        seed=args.seed,
        random_seed=args.random_seed,
        terminal_colours=args.terminal_colours,
        max_brightness=args.max_brightness,
        no_palette=args.no_palette,
        debug=args.debug,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    All output is computed before anything is printed, so a failing run leaves
    stdout empty.
    """
    config = parse_cli_args(argv)
    if config.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Path", str(config.path)),
                    ("Colours", config.colour_count),
                    ("Seed", "random" if config.random_seed else config.seed),
                    ("Terminal", config.terminal_colours),
                    ("Max brightness", config.max_brightness),
                    ("Palette", not config.no_palette),
                ]
            )
        )

    try:
        swatches = find_dominant_colours(config)
    except DominantColoursError as exc:
        error(str(exc))
        return EXIT_RUNTIME_ERROR

    lines: List[str] = render_lines(swatches, palette=not config.no_palette)
    for line in lines:
        print(line)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
