# dominant_colours/palette_data.py
from __future__ import annotations

"""
Terminal palette builder.

Exports:
  build_palette(table=TERMINAL_PALETTE)
    -> (entries: tuple[PaletteEntry, ...], pal_lab: Lab)
  PALETTE_ENTRIES, PALETTE_LAB  # built once at import
"""

from typing import Sequence, Tuple

import numpy as np

from .colour_convert import rgb_to_lab
from .constants import TERMINAL_PALETTE
from .core_types import Lab, PaletteEntry, RGBTuple, hex_to_rgb


def build_palette(
    table: Sequence[Tuple[int, str, str]] = TERMINAL_PALETTE,
) -> Tuple[Tuple[PaletteEntry, ...], Lab]:
    """
    Convert (position, hex, name) rows into:
      entries: PaletteEntry tuple sorted by position
      pal_lab: float32 array [P,3] aligned with entries
    """
    rows = sorted(table, key=lambda row: row[0])
    rgbs_u8 = np.array([hex_to_rgb(hx) for _pos, hx, _name in rows], dtype=np.uint8)
    pal_lab: Lab = rgb_to_lab(rgbs_u8).reshape(-1, 3)
    pal_lab.setflags(write=False)

    entries = []
    for i, (position, _hx, name) in enumerate(rows):
        rgb_tuple: RGBTuple = (
            int(rgbs_u8[i, 0]),
            int(rgbs_u8[i, 1]),
            int(rgbs_u8[i, 2]),
        )
        entries.append(
            PaletteEntry(position=position, name=name, rgb=rgb_tuple, lab=pal_lab[i])
        )
    return tuple(entries), pal_lab


PALETTE_ENTRIES, PALETTE_LAB = build_palette()

__all__ = ["build_palette", "PALETTE_ENTRIES", "PALETTE_LAB"]
