# dominant_colours/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass, field
from typing import Callable, Literal, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .constants import BRIGHT_OFFSET

# Basic aliases

RGBTuple = Tuple[int, int, int]
HexStr = str

U8Samples = NDArray[np.uint8]  # (N, 4) RGBA
Lab = NDArray[np.float32]  # (..., 3) CIE Lab

SamplerKind = Literal["static", "animated"]

# Value objects


@dataclass(frozen=True)
class PaletteEntry:
    """Terminal palette entry with its table position and precomputed Lab row."""

    position: int
    name: str
    rgb: RGBTuple
    lab: Lab = field(compare=False, repr=False)  # shape (3,)

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)

    @property
    def is_bright(self) -> bool:
        return self.position >= BRIGHT_OFFSET


@dataclass(frozen=True)
class ColourSwatch:
    """One rendered output colour."""

    rgb: RGBTuple

    @property
    def hex(self) -> HexStr:
        return rgb_to_hex(self.rgb)


ColourLike = Union[RGBTuple, PaletteEntry, ColourSwatch]

# Small helpers


def rgb_to_hex(rgb: RGBTuple) -> HexStr:
    """RGB tuple to lowercase hex string '#rrggbb'."""
    return f"#{rgb[0]:02x}{rgb[1]:02x}{rgb[2]:02x}"


def hex_to_rgb(hex_str: str) -> RGBTuple:
    """Parse '#rgb' or '#rrggbb' (case-insensitive) into an RGB tuple."""
    s = hex_str.strip().lower()
    if not s.startswith("#"):
        raise ValueError("hex must start with '#'")
    if len(s) == 4:
        r, g, b = s[1], s[2], s[3]
        s = f"#{r}{r}{g}{g}{b}{b}"
    if len(s) != 7:
        raise ValueError("hex must be '#rrggbb' or '#rgb'")
    return (int(s[1:3], 16), int(s[3:5], 16), int(s[5:7], 16))


def coerce_to_rgb_tuple(value: Union[ColourLike, Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a palette entry, swatch, 3-length sequence or array row to an
    (int, int, int) RGB tuple.
    """
    if isinstance(value, (PaletteEntry, ColourSwatch)):
        return value.rgb
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        return (int(value[..., 0]), int(value[..., 1]), int(value[..., 2]))
    if len(value) < 3:  # type: ignore[arg-type]
        raise ValueError("sequence too small for RGB")
    v = value  # type: ignore[assignment]
    return (int(v[0]), int(v[1]), int(v[2]))


def assert_u8_samples(samples: np.ndarray) -> U8Samples:
    """Validate a non-empty uint8 (N,4) sample array and return it typed."""
    if samples.dtype != np.uint8 or samples.ndim != 2 or samples.shape[-1] != 4:
        raise TypeError("expected uint8 (N,4) samples")
    return samples  # type: ignore[return-value]


# Callable signatures

# (points, k, seed, max_iterations, converge) -> centroids (<=k, 3)
Quantizer = Callable[[Lab, int, int, int, float], Lab]

__all__ = [
    # aliases / types
    "RGBTuple",
    "HexStr",
    "U8Samples",
    "Lab",
    "SamplerKind",
    "ColourLike",
    # value objects
    "PaletteEntry",
    "ColourSwatch",
    # helpers
    "rgb_to_hex",
    "hex_to_rgb",
    "coerce_to_rgb_tuple",
    "assert_u8_samples",
    # callable signatures
    "Quantizer",
]
