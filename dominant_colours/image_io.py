# dominant_colours/image_io.py
from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Dict, List, Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .constants import (
    ANIMATED_EXTENSIONS,
    MAX_ANIMATION_FRAMES,
    MAX_ANIMATION_SAMPLES,
    SUPPORTED_FORMATS,
)
from .core_types import SamplerKind, U8Samples, assert_u8_samples
from .errors import (
    ImageDecodeError,
    ImageIOError,
    UnrecognisedFormatError,
    UnsupportedFormatError,
)
from .utils import debug_log, key_value_pairs_to_string

"""
Image sampling: turn an image file into a flat (N, 4) uint8 RGBA sample array.

Static images contribute every pixel. Animated images (GIF) contribute a bounded,
evenly spaced selection of composited frames.
"""

try:
    from PIL import ImageCms  # ICC conversion if profile present
except ImportError:  # pragma: no cover
    ImageCms = None  # type: ignore[assignment]


HIGH_BIT_DEPTH_MODES = ("I;16", "I;16B", "I;16L", "I;16N", "I")


def _reduce_bit_depth(im: Image.Image) -> Image.Image:
    """
    Scale 16/32-bit greyscale modes down to 8-bit L.

    Integer modes are read as 16-bit (0..65535) data and float mode F as
    0..1; Pillow's own convert() would clip both to white instead.
    """
    if im.mode in HIGH_BIT_DEPTH_MODES:
        arr = np.asarray(im).astype(np.float64) / 257.0
    elif im.mode == "F":
        arr = np.asarray(im).astype(np.float64) * 255.0
    else:
        return im
    return Image.fromarray(np.clip(np.rint(arr), 0, 255).astype(np.uint8))


def _convert_to_srgb_rgba(im: Image.Image) -> Image.Image:
    im = ImageOps.exif_transpose(im)
    icc_bytes = im.info.get("icc_profile")
    im = _reduce_bit_depth(im)

    if icc_bytes and ImageCms is not None:
        try:
            src_prof = ImageCms.ImageCmsProfile(io.BytesIO(icc_bytes))
            dst_prof = ImageCms.createProfile("sRGB")
            im2 = ImageCms.profileToProfile(
                im,
                src_prof,
                dst_prof,
                renderingIntent=ImageCms.Intent.PERCEPTUAL,
                outputMode="RGBA",
            )
            if im2 is not None:
                return im2
        except (ImageCms.PyCMSError, OSError, ValueError):
            # Unusable profile: fall back to the raw values.
            pass

    return im.convert("RGBA")


def sampler_kind(path: Path) -> SamplerKind:
    """Pick the sampling strategy from the file extension (case-insensitive)."""
    return "animated" if path.suffix.lower() in ANIMATED_EXTENSIONS else "static"


def codec_format(path: Path) -> str:
    """
    Resolve the Pillow format name for a path's extension.

    Raises UnrecognisedFormatError for extensions the codec does not know and
    UnsupportedFormatError for formats outside SUPPORTED_FORMATS.
    """
    fmt = Image.registered_extensions().get(path.suffix.lower())
    if fmt is None:
        raise UnrecognisedFormatError(path.suffix)
    if fmt not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(fmt)
    return fmt


def select_frame_indices(
    n_frames: int, max_frames: int = MAX_ANIMATION_FRAMES
) -> List[int]:
    """
    Evenly spaced frame indices covering the whole animation.

    All frames when n_frames <= max_frames; otherwise exactly max_frames indices
    including the first and last frame.
    """
    if n_frames <= 0:
        return []
    if n_frames <= max_frames or max_frames <= 1:
        return list(range(min(n_frames, max(1, max_frames))))
    picks = np.rint(np.linspace(0, n_frames - 1, max_frames)).astype(int)
    return sorted(set(picks.tolist()))


def _stride_for(n_pixels: int, budget: int) -> int:
    """Whole-pixel stride keeping n_pixels within budget."""
    return max(1, -(-n_pixels // max(1, budget)))


def sample_static(im: Image.Image) -> U8Samples:
    """Every pixel of a single-frame image."""
    rgba = _convert_to_srgb_rgba(im)
    return np.asarray(rgba, dtype=np.uint8).reshape(-1, 4)


def sample_animated(
    im: Image.Image,
    max_frames: int = MAX_ANIMATION_FRAMES,
    max_samples: int = MAX_ANIMATION_SAMPLES,
) -> U8Samples:
    """
    Pixels from a bounded selection of frames.

    Each selected frame gets an equal share of max_samples and is strided by
    whole pixels when it exceeds that share, so no blended colours appear.
    """
    n_frames = int(getattr(im, "n_frames", 1))
    indices = select_frame_indices(n_frames, max_frames)
    per_frame = max(1, max_samples // max(1, len(indices)))

    chunks: List[np.ndarray] = []
    for i in indices:
        im.seek(i)
        rgba = _reduce_bit_depth(im).convert("RGBA")
        frame = np.asarray(rgba, dtype=np.uint8).reshape(-1, 4)
        chunks.append(frame[:: _stride_for(frame.shape[0], per_frame)])
    if not chunks:
        return np.zeros((0, 4), dtype=np.uint8)
    return np.concatenate(chunks, axis=0)


SAMPLERS: Dict[SamplerKind, Callable[[Image.Image], U8Samples]] = {
    "static": sample_static,
    "animated": sample_animated,
}


def extract_samples(path: Union[str, Path], debug: bool = False) -> U8Samples:
    """
    Decode an image file and return its RGBA samples, shape (N, 4), N >= 1.

    Raises:
      ImageIOError: path missing or unreadable.
      UnrecognisedFormatError / UnsupportedFormatError: extension not usable.
      ImageDecodeError: data is corrupt or not the format the extension names.
    """
    path = Path(path)
    try:
        fp = open(path, "rb")
    except OSError as exc:
        raise ImageIOError(exc.strerror or str(exc)) from exc

    with fp:
        fmt = codec_format(path)
        kind = sampler_kind(path)
        try:
            with Image.open(fp, formats=[fmt]) as im:
                if debug:
                    debug_log(
                        key_value_pairs_to_string(
                            [
                                ("Loaded", f"{im.width}x{im.height}"),
                                ("Format", fmt),
                                ("Frames", int(getattr(im, "n_frames", 1))),
                                ("Sampler", kind),
                            ]
                        )
                    )
                samples = SAMPLERS[kind](im)
        except UnidentifiedImageError as exc:
            raise ImageDecodeError(fmt, f"not a valid {fmt} image") from exc
        except (OSError, SyntaxError, ValueError, EOFError) as exc:
            raise ImageDecodeError(fmt, str(exc)) from exc
        except Image.DecompressionBombError as exc:
            raise ImageDecodeError(fmt, str(exc)) from exc

    if samples.shape[0] == 0:
        raise ImageDecodeError(fmt, "image has no pixels")
    if debug:
        debug_log(f"samples: {samples.shape[0]:,}")
    return assert_u8_samples(samples)


__all__ = [
    "SAMPLERS",
    "sampler_kind",
    "codec_format",
    "select_frame_indices",
    "sample_static",
    "sample_animated",
    "extract_samples",
]
