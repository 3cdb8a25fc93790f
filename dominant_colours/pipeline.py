# dominant_colours/pipeline.py
from __future__ import annotations

"""
One run end-to-end:
  load -> sample -> Lab -> k-means -> RGB -> [terminal snap] -> dedup -> lines.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from .cluster import find_centroids, kmeans_centroids, resolve_seed
from .colour_convert import to_display, to_perceptual
from .constants import DEFAULT_MAX_COLOURS, DEFAULT_SEED, TERMINAL_MIN_COLOURS
from .core_types import ColourLike, ColourSwatch, Quantizer
from .image_io import extract_samples
from .render import render_lines, to_swatches
from .snap import snap_to_palette
from .utils import debug_log, format_seconds_compact, key_value_pairs_to_string


@dataclass(frozen=True)
class RunConfig:
    """Resolved options for a single run."""

    path: Path
    max_colours: int = DEFAULT_MAX_COLOURS
    seed: int = DEFAULT_SEED
    random_seed: bool = False
    terminal_colours: bool = False
    max_brightness: bool = False
    no_palette: bool = False
    debug: bool = False

    @property
    def colour_count(self) -> int:
        """Cluster count: terminal mode needs at least one candidate per table entry."""
        if self.terminal_colours:
            return max(self.max_colours, TERMINAL_MIN_COLOURS)
        return self.max_colours


def find_dominant_colours(
    config: RunConfig, quantizer: Quantizer = kmeans_centroids
) -> List[ColourSwatch]:
    """Run the pipeline and return distinct swatches in output order."""
    t_start = time.perf_counter()

    samples = extract_samples(config.path, debug=config.debug)
    t_loaded = time.perf_counter()

    lab = to_perceptual(samples)
    seed = resolve_seed(config.seed, config.random_seed)
    centroids = find_centroids(
        lab, config.colour_count, seed, quantizer=quantizer, debug=config.debug
    )
    t_clustered = time.perf_counter()

    colours: List[ColourLike] = list(to_display(centroids))
    if config.terminal_colours:
        # Images with fewer pixels than table entries yield fewer centroids;
        # cycle them so every entry still gets a candidate.
        if len(colours) < TERMINAL_MIN_COLOURS:
            colours = [colours[i % len(colours)] for i in range(TERMINAL_MIN_COLOURS)]
        colours = list(
            snap_to_palette(
                colours, max_brightness=config.max_brightness, debug=config.debug
            )
        )

    swatches = to_swatches(colours)
    if config.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Centroids", int(centroids.shape[0])),
                    ("Distinct", len(swatches)),
                    ("Load", format_seconds_compact(t_loaded - t_start)),
                    ("Cluster", format_seconds_compact(t_clustered - t_loaded)),
                ]
            )
        )
    return swatches


def run(
    path: Union[str, Path], quantizer: Quantizer = kmeans_centroids, **options
) -> List[str]:
    """Convenience wrapper: output lines for path with RunConfig options."""
    config = RunConfig(path=Path(path), **options)
    swatches = find_dominant_colours(config, quantizer=quantizer)
    return render_lines(swatches, palette=not config.no_palette)


__all__ = ["RunConfig", "find_dominant_colours", "run"]
