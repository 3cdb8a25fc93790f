# dominant_colours/snap.py
from __future__ import annotations

"""
Snap representative colours onto the 16-colour terminal palette.

Colours are matched to palette entries one-to-one: every (colour, entry) pair
is ranked by Euclidean Lab distance and, cheapest first, each entry takes the
closest colour not yet taken. With at least 16 colours the whole table is
covered. Colours left over once every entry is taken fall back to their
nearest entry. The matched entries are returned in table position order.

Max-brightness bias:
  A colour matched to a normal-tier entry is "ambiguous" when its bright
  counterpart is within MAX_BRIGHTNESS_RATIO x the matched distance. Normal
  entries reached by an ambiguous colour are promoted to their bright
  counterpart, unless that counterpart is already part of the result. The
  number of entries never changes and every promotion raises L*, so average
  brightness can only go up.
"""

from typing import Dict, Iterable, List, Sequence, Set

import numpy as np

from .colour_convert import rgb_to_lab
from .constants import BRIGHT_OFFSET, MAX_BRIGHTNESS_RATIO
from .core_types import ColourLike, Lab, PaletteEntry, coerce_to_rgb_tuple
from .palette_data import PALETTE_ENTRIES, PALETTE_LAB
from .utils import debug_log, lab_distances


def _bright_counterparts(entries: Sequence[PaletteEntry]) -> Dict[int, int]:
    """Index of a normal-tier entry -> index of its bright counterpart."""
    index_of = {e.position: i for i, e in enumerate(entries)}
    out: Dict[int, int] = {}
    for i, e in enumerate(entries):
        if e.is_bright:
            continue
        k = index_of.get(e.position + BRIGHT_OFFSET)
        if k is not None:
            out[i] = k
    return out


def assign_unique(dist: np.ndarray) -> np.ndarray:
    """
    One-to-one colour -> entry assignment over a (S, P) distance matrix.

    Pairs are taken in ascending distance; a pair is accepted when neither its
    colour nor its entry is taken yet. That covers min(S, P) distinct entries.
    Rows still unassigned afterwards (S > P) get their nearest entry.
    Returns (S,) int32 palette indices.
    """
    S, P = dist.shape
    assigned = np.full(S, -1, dtype=np.int32)
    taken = np.zeros(P, dtype=bool)
    remaining = min(S, P)

    order = np.argsort(dist, axis=None, kind="stable")
    for flat in order.tolist():
        if remaining == 0:
            break
        i, j = divmod(flat, P)
        if assigned[i] >= 0 or taken[j]:
            continue
        assigned[i] = j
        taken[j] = True
        remaining -= 1

    leftover = assigned < 0
    if leftover.any():
        assigned[leftover] = np.argmin(dist[leftover], axis=1)
    return assigned


def promote_bright(
    dist: np.ndarray,
    assigned: np.ndarray,
    entries: Sequence[PaletteEntry],
    ratio: float = MAX_BRIGHTNESS_RATIO,
) -> Set[int]:
    """
    Apply the max-brightness bias to a colour -> entry assignment.

    dist: (S, P) Lab distances; assigned: (S,) chosen palette indices.
    Returns the set of palette indices to emit.
    """
    counterpart = _bright_counterparts(entries)
    chosen = {int(j) for j in assigned.tolist()}

    ambiguous: Set[int] = set()
    for row, j in zip(dist, assigned.tolist()):
        k = counterpart.get(int(j))
        if k is not None and row[k] <= ratio * row[j]:
            ambiguous.add(int(j))

    result = set(chosen)
    for j in sorted(ambiguous):
        k = counterpart[j]
        if k in chosen:
            continue
        result.discard(j)
        result.add(k)
    return result


def snap_to_palette(
    colours: Iterable[ColourLike],
    max_brightness: bool = False,
    entries: Sequence[PaletteEntry] = PALETTE_ENTRIES,
    pal_lab: Lab = PALETTE_LAB,
    debug: bool = False,
) -> List[PaletteEntry]:
    """
    Match colours to palette entries one-to-one.

    Returns the distinct matched entries ordered by table position; all of
    them once there are at least as many colours as entries.
    """
    rgbs = [coerce_to_rgb_tuple(c) for c in colours]
    if not rgbs:
        return []

    src_lab: Lab = rgb_to_lab(np.array(rgbs, dtype=np.uint8)).reshape(-1, 3)
    dist = lab_distances(src_lab, pal_lab)
    assigned = assign_unique(dist)

    if max_brightness:
        chosen = promote_bright(dist, assigned, entries)
    else:
        chosen = {int(j) for j in assigned.tolist()}

    if debug:
        for rgb, j in zip(rgbs, assigned.tolist()):
            e = entries[j]
            debug_log(f"snap {rgb} -> {e.position:>2} {e.hex} {e.name}")

    return sorted((entries[j] for j in chosen), key=lambda e: e.position)


__all__ = ["assign_unique", "promote_bright", "snap_to_palette"]
