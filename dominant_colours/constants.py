"""
Global tables and tunables used across the project.

- TERMINAL_PALETTE
- CLI defaults (DEFAULT_*)
- k-means configuration (MAX_ITERATIONS, CONVERGENCE, VERBOSE)
- Animated image sampling budgets (MAX_ANIMATION_*)
- Terminal snapping tunables
- Codec formats accepted by the sampler
"""
from __future__ import annotations

from typing import Tuple

# =========================
# Terminal palette (position, hex, name)
# =========================
TERMINAL_PALETTE: Tuple[Tuple[int, str, str], ...] = (
    (0, "#000000", "Black"),
    (1, "#aa0000", "Red"),
    (2, "#00aa00", "Green"),
    (3, "#808000", "Yellow"),
    (4, "#0000aa", "Blue"),
    (5, "#aa00aa", "Magenta"),
    (6, "#00aaaa", "Cyan"),
    (7, "#aaaaaa", "White"),
    (8, "#555555", "Bright Black"),
    (9, "#ff0000", "Bright Red"),
    (10, "#00ff00", "Bright Green"),
    (11, "#ffff00", "Bright Yellow"),
    (12, "#0000ff", "Bright Blue"),
    (13, "#ff00ff", "Bright Magenta"),
    (14, "#00ffff", "Bright Cyan"),
    (15, "#ffffff", "Bright White"),
)

# Normal tier occupies positions 0..7, its bright counterpart sits at +8.
BRIGHT_OFFSET: int = 8

# =========================
# CLI defaults
# =========================
DEFAULT_MAX_COLOURS: int = 5
DEFAULT_SEED: int = 0
SEED_UPPER_BOUND: int = 2**64
TERMINAL_MIN_COLOURS: int = len(TERMINAL_PALETTE)

# =========================
# k-means
# =========================
MAX_ITERATIONS: int = 20
CONVERGENCE: float = 1.0
VERBOSE: bool = False

# =========================
# Animated images
# =========================
ANIMATED_EXTENSIONS: Tuple[str, ...] = (".gif",)
MAX_ANIMATION_FRAMES: int = 50
MAX_ANIMATION_SAMPLES: int = 1_000_000

# =========================
# Terminal snapping
# =========================
# A colour snapped to a normal-tier entry counts as ambiguous when its bright
# counterpart is no further than this multiple of the nearest distance.
MAX_BRIGHTNESS_RATIO: float = 2.0

# =========================
# Codec
# =========================
SUPPORTED_FORMATS: Tuple[str, ...] = (
    "BMP",
    "GIF",
    "ICO",
    "JPEG",
    "PNG",
    "PPM",
    "TGA",
    "TIFF",
)

__all__ = [
    "TERMINAL_PALETTE",
    "BRIGHT_OFFSET",
    "DEFAULT_MAX_COLOURS",
    "DEFAULT_SEED",
    "SEED_UPPER_BOUND",
    "TERMINAL_MIN_COLOURS",
    "MAX_ITERATIONS",
    "CONVERGENCE",
    "VERBOSE",
    "ANIMATED_EXTENSIONS",
    "MAX_ANIMATION_FRAMES",
    "MAX_ANIMATION_SAMPLES",
    "MAX_BRIGHTNESS_RATIO",
    "SUPPORTED_FORMATS",
]
