"""
dominant_colours package.

Purpose:
  Find the dominant colours in an image. See dominant_colours.cli for the CLI.

Public API:
  run               : output lines for one image.
  RunConfig         : options for one run.
  find_dominant_colours : swatches for one run.
  colour_convert    : sRGB <-> Lab transforms (to_perceptual, to_display).
  core_types        : shared aliases and value objects (PaletteEntry, ColourSwatch).
  palette_data      : the 16-colour terminal palette.
  errors            : runtime error taxonomy.

Quick start:
  from dominant_colours import run
  for line in run("photo.jpg", max_colours=8, no_palette=True):
      print(line)
"""

__version__ = "1.0.0"

# Re-export namespaces for convenience.
from . import colour_convert  # noqa: E402
from . import core_types  # noqa: E402
from . import errors  # noqa: E402
from . import palette_data  # noqa: E402

from .pipeline import RunConfig, find_dominant_colours, run  # noqa: E402

__all__ = [
    "__version__",
    "colour_convert",
    "core_types",
    "errors",
    "palette_data",
    "RunConfig",
    "find_dominant_colours",
    "run",
]
