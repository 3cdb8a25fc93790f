# dominant_colours/utils.py
from __future__ import annotations

"""
Shared utilities for dominant_colours.

Includes Lab distance helpers, duration and number formatting, and tidy
diagnostic logging. Every log helper writes to stderr so stdout only ever
carries swatch lines.
"""

import sys
from typing import Any, Iterable, List, Tuple

import numpy as np

from .core_types import Lab


# Lab distance helpers


def lab_distances(src_lab: Lab, pal_lab: Lab) -> np.ndarray:
    """Euclidean distance matrix (S, P) between source rows and palette rows."""
    diff = pal_lab[None, :, :].astype(np.float64) - src_lab[:, None, :]
    return np.sqrt(np.sum(diff * diff, axis=2))


#  Time / size formatting


def format_seconds_compact(seconds: float) -> str:
    """Human-friendly seconds: '<ms>ms', '<s>s', or 'Mm Ss'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


# Pretty logging


def format_bool_on_off(value: Any) -> str:
    """Pretty boolean: 'on'/'off' for bools; str(value) otherwise."""
    if isinstance(value, bool):
        return "on" if value else "off"
    return str(value)


def format_number_compact(value: Any) -> str:
    """Pretty number: 1_234 style for ints; compact for floats; passthrough otherwise."""
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        text = f"{value:.3f}".rstrip("0").rstrip(".")
        return text
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """
    Format (name, value) pairs as 'Name: value' blocks separated by sep.
    Uses format_bool_on_off / format_number_compact for readability.
    """
    out: List[str] = []
    for name, value in pairs:
        display = (
            format_bool_on_off(value)
            if isinstance(value, bool)
            else format_number_compact(value)
        )
        out.append(f"{name}{eq}{display}")
    return sep.join(out)


def print_config_line(section: str, pairs: Iterable[Tuple[str, Any]]) -> None:
    """
    Emit a single human-readable config line as a debug message, e.g.:
      [debug] [kmeans] K: 5  Seed: 0  Max iterations: 20  Converge: 1
    """
    debug_log(f"[{section}] {key_value_pairs_to_string(pairs)}")


def debug_log(message: str) -> None:
    """Debug log line to stderr."""
    print(f"[debug] {message}", file=sys.stderr, flush=True)


def error(message: str) -> None:
    """Error line to stderr, printed verbatim."""
    print(message, file=sys.stderr, flush=True)


__all__ = [
    # distance helpers
    "lab_distances",
    # formatting
    "format_seconds_compact",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    # logging
    "print_config_line",
    "debug_log",
    "error",
]
