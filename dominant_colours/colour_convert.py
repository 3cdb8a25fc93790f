# dominant_colours/colour_convert.py
from __future__ import annotations

"""
sRGB <-> CIE Lab (D65). Vectorised NumPy implementations.

Exports:
  rgb_to_linear(srgb)
  linear_to_rgb(linear)
  rgb_to_lab(rgb)
  lab_to_rgb(lab)
  to_perceptual(samples)   # RGBA samples -> Lab rows for clustering
  to_display(lab)          # Lab rows -> 8-bit RGB tuples
  lightness_of(rgb)        # L* of a single colour
"""

from typing import List

import numpy as np

from .core_types import Lab, RGBTuple

# linear RGB -> XYZ (sRGB primaries, D65)
_RGB_TO_XYZ = np.array(
    [
        [0.4124564, 0.3575761, 0.1804375],
        [0.2126729, 0.7151522, 0.0721750],
        [0.0193339, 0.1191920, 0.9503041],
    ],
    dtype=np.float64,
)
_XYZ_TO_RGB = np.array(
    [
        [3.2404542, -1.5371385, -0.4985314],
        [-0.9692660, 1.8760108, 0.0415560],
        [0.0556434, -0.2040259, 1.0572252],
    ],
    dtype=np.float64,
)
_WHITE_D65 = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def rgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """
    sRGB (nonlinear 0..1) -> linear RGB (0..1). Vectorised.
    Accepts any shape (..., 3).
    """
    u = srgb.astype(np.float64, copy=False)
    return np.where(u <= 0.04045, u / 12.92, ((u + 0.055) / 1.055) ** 2.4)


def linear_to_rgb(linear: np.ndarray) -> np.ndarray:
    """
    Linear RGB -> sRGB (nonlinear 0..1). Out-of-gamut values are clamped first.
    """
    u = np.clip(linear.astype(np.float64, copy=False), 0.0, 1.0)
    return np.where(u <= 0.0031308, 12.92 * u, 1.055 * u ** (1.0 / 2.4) - 0.055)


def rgb_to_lab(rgb: np.ndarray) -> Lab:
    """
    sRGB -> CIE Lab (D65). Accepts integer [0..255] or float [0..1].
    Preserves input shape (..., 3). Returns float32.
    """
    arr = np.asarray(rgb)
    if np.issubdtype(arr.dtype, np.integer):
        arr = arr.astype(np.float64) / 255.0

    linear = rgb_to_linear(arr)
    xyz = linear @ _RGB_TO_XYZ.T
    t = xyz / _WHITE_D65

    f = np.where(t > _EPSILON, np.cbrt(t), (_KAPPA * t + 16.0) / 116.0)

    out = np.empty(t.shape, dtype=np.float32)
    out[..., 0] = 116.0 * f[..., 1] - 16.0
    out[..., 1] = 500.0 * (f[..., 0] - f[..., 1])
    out[..., 2] = 200.0 * (f[..., 1] - f[..., 2])
    return out  # type: ignore[return-value]


def lab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """
    CIE Lab (D65) -> sRGB uint8 [0..255]. Preserves shape (..., 3).
    """
    arr = np.asarray(lab, dtype=np.float64)
    L, a, b = arr[..., 0], arr[..., 1], arr[..., 2]

    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    def finv(f: np.ndarray) -> np.ndarray:
        f3 = f**3
        return np.where(f3 > _EPSILON, f3, (116.0 * f - 16.0) / _KAPPA)

    xyz = np.stack([finv(fx), finv(fy), finv(fz)], axis=-1) * _WHITE_D65
    srgb = linear_to_rgb(xyz @ _XYZ_TO_RGB.T)
    return np.clip(np.rint(srgb * 255.0), 0, 255).astype(np.uint8)


def to_perceptual(samples: np.ndarray) -> Lab:
    """RGBA (or RGB) uint8 samples (N, 4|3) -> Lab float32 (N, 3). Alpha is ignored."""
    return rgb_to_lab(samples[:, :3])


def to_display(lab: Lab) -> List[RGBTuple]:
    """Lab rows (N, 3) -> list of 8-bit RGB tuples, in row order."""
    rgb = lab_to_rgb(np.asarray(lab).reshape(-1, 3))
    return [(int(r), int(g), int(b)) for r, g, b in rgb.tolist()]


def lightness_of(rgb: RGBTuple) -> float:
    """Lab L* of one 8-bit RGB colour."""
    return float(rgb_to_lab(np.array(rgb, dtype=np.uint8))[0])


__all__ = [
    "rgb_to_linear",
    "linear_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "to_perceptual",
    "to_display",
    "lightness_of",
]
