# dominant_colours/errors.py
from __future__ import annotations

"""
Runtime error taxonomy. All of these are fatal for a run; the CLI reports the
message once and exits with status 1. Argument errors are argparse's own.
"""


class DominantColoursError(Exception):
    """Base class for runtime failures."""


class ImageIOError(DominantColoursError):
    """The input path does not exist or cannot be read."""


class ImageFormatError(DominantColoursError):
    """The input is not an image this tool can decode."""


class UnrecognisedFormatError(ImageFormatError):
    """The file extension is not known to the codec."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(
            f"The file extension `{extension}` was not recognized as an image format"
        )


class UnsupportedFormatError(ImageFormatError):
    """The format is known to the codec but not accepted by the sampler."""

    def __init__(self, format_name: str) -> None:
        self.format_name = format_name
        super().__init__(f"The image format {format_name} is not supported")


class ImageDecodeError(ImageFormatError):
    """The content is corrupt or does not match the format its extension names."""

    def __init__(self, format_name: str, reason: str) -> None:
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Format error decoding {format_name}: {reason}")


__all__ = [
    "DominantColoursError",
    "ImageIOError",
    "ImageFormatError",
    "UnrecognisedFormatError",
    "UnsupportedFormatError",
    "ImageDecodeError",
]
