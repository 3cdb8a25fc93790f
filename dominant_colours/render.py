# dominant_colours/render.py
from __future__ import annotations

"""
Swatch rendering.

Colours become ColourSwatch values, deduplicated by hex string (first
occurrence wins), then formatted either as an ANSI true-colour block followed
by the hex code, or as the bare hex code.
"""

from typing import Iterable, List

from .core_types import ColourLike, ColourSwatch, coerce_to_rgb_tuple

SWATCH_BLOCK = "▇"  # lower seven eighths block
ANSI_RESET = "\x1b[0m"


def ansi_foreground(r: int, g: int, b: int) -> str:
    """24-bit foreground colour escape sequence."""
    return f"\x1b[38;2;{r};{g};{b}m"


def to_swatches(colours: Iterable[ColourLike]) -> List[ColourSwatch]:
    """Build swatches, dropping any whose hex string has already been seen."""
    seen = set()
    out: List[ColourSwatch] = []
    for colour in colours:
        swatch = ColourSwatch(coerce_to_rgb_tuple(colour))
        if swatch.hex in seen:
            continue
        seen.add(swatch.hex)
        out.append(swatch)
    return out


def format_swatch(swatch: ColourSwatch, palette: bool = True) -> str:
    if not palette:
        return swatch.hex
    r, g, b = swatch.rgb
    return f"{ansi_foreground(r, g, b)}{SWATCH_BLOCK} {swatch.hex}{ANSI_RESET}"


def render_lines(colours: Iterable[ColourLike], palette: bool = True) -> List[str]:
    """One output line per distinct colour, in input order."""
    return [format_swatch(s, palette) for s in to_swatches(colours)]


__all__ = [
    "SWATCH_BLOCK",
    "ANSI_RESET",
    "ansi_foreground",
    "to_swatches",
    "format_swatch",
    "render_lines",
]
