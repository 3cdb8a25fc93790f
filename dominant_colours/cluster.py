# dominant_colours/cluster.py
from __future__ import annotations

"""
k-means invocation with a fixed configuration.

The clustering itself is scikit-learn's KMeans (Elkan's accelerated variant);
this module only owns its configuration, the seed policy, and the Quantizer
seam so another conformant implementation can be swapped in.

Fixed configuration:
  MAX_ITERATIONS = 20
  CONVERGENCE    = 1.0  (total squared centroid shift between iterations, Lab units)
  VERBOSE        = False
"""

import warnings

import numpy as np
from sklearn.cluster import KMeans
from sklearn.exceptions import ConvergenceWarning

from .constants import CONVERGENCE, MAX_ITERATIONS, SEED_UPPER_BOUND, VERBOSE
from .core_types import Lab, Quantizer
from .utils import print_config_line


def draw_random_seed() -> int:
    """Fresh 64-bit seed from OS entropy."""
    rng = np.random.default_rng()
    return int(rng.integers(0, SEED_UPPER_BOUND - 1, dtype=np.uint64, endpoint=True))


def resolve_seed(seed: int, random_seed: bool) -> int:
    """The seed to use for this run: fresh when random_seed, else seed verbatim."""
    return draw_random_seed() if random_seed else int(seed)


def random_state_for(seed: int) -> np.random.RandomState:
    """RandomState over MT19937 seeded via SeedSequence, so all 64 bits count."""
    return np.random.RandomState(np.random.MT19937(int(seed)))


def kmeans_centroids(
    points: Lab,
    k: int,
    seed: int,
    max_iterations: int = MAX_ITERATIONS,
    converge: float = CONVERGENCE,
) -> Lab:
    """
    Run k-means on Lab points and return the (k, 3) centroids.

    scikit-learn scales `tol` by the mean per-feature variance of the data; the
    threshold is divided by that variance so `converge` stays absolute.
    """
    X = np.asarray(points, dtype=np.float32)
    mean_var = float(np.mean(np.var(X, axis=0, dtype=np.float64)))
    tol = converge / mean_var if mean_var > 0.0 else 0.0

    km = KMeans(
        n_clusters=k,
        init="k-means++",
        n_init=1,
        max_iter=max_iterations,
        tol=tol,
        algorithm="lloyd" if k == 1 else "elkan",
        verbose=int(VERBOSE),
        random_state=random_state_for(seed),
    )
    with warnings.catch_warnings():
        # Fewer distinct colours than clusters yields duplicate centroids;
        # the renderer collapses them.
        warnings.simplefilter("ignore", ConvergenceWarning)
        km.fit(X)
    return km.cluster_centers_.astype(np.float32, copy=False)


def find_centroids(
    lab: Lab,
    k: int,
    seed: int,
    quantizer: Quantizer = kmeans_centroids,
    debug: bool = False,
) -> Lab:
    """
    Cluster Lab samples into at most k centroids.

    k is clamped to the number of samples since k-means cannot place more
    clusters than there are points.
    """
    n_samples = int(lab.shape[0])
    if n_samples == 0:
        raise ValueError("no samples to cluster")
    k_eff = max(1, min(int(k), n_samples))
    if debug:
        print_config_line(
            "kmeans",
            [
                ("K", k_eff),
                ("Seed", int(seed)),
                ("Samples", n_samples),
                ("Max iterations", MAX_ITERATIONS),
                ("Converge", CONVERGENCE),
            ],
        )
    centroids = quantizer(lab, k_eff, int(seed), MAX_ITERATIONS, CONVERGENCE)
    return np.asarray(centroids, dtype=np.float32).reshape(-1, 3)[:k_eff]


__all__ = [
    "draw_random_seed",
    "resolve_seed",
    "random_state_for",
    "kmeans_centroids",
    "find_centroids",
]
