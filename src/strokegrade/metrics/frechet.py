"""Discrete Fréchet distance between two polylines."""

from __future__ import annotations

import numpy as np

from strokegrade.models import Polyline


def pairwise_distances(a: Polyline, b: Polyline) -> np.ndarray:
    """Euclidean distance matrix of shape ``(len(a), len(b))``."""
    xa = np.array([p.x for p in a], dtype=np.float64)
    ya = np.array([p.y for p in a], dtype=np.float64)
    xb = np.array([p.x for p in b], dtype=np.float64)
    yb = np.array([p.y for p in b], dtype=np.float64)
    return np.hypot(xa[:, None] - xb[None, :], ya[:, None] - yb[None, :])


def frechet_distance(a: Polyline, b: Polyline) -> float:
    """Discrete Fréchet distance between *a* and *b*.

    Fills the coupling cost table row by row, keeping only the previous
    row::

        C[i][j] = max(d(a[i], b[j]), min(C[i-1][j], C[i][j-1], C[i-1][j-1]))

    Returns ``inf`` when either polyline is empty.
    """
    if len(a) == 0 or len(b) == 0:
        return float("inf")

    dist = pairwise_distances(a, b)
    n, m = dist.shape

    # Row 0 can only be reached from the left.
    prev = np.maximum.accumulate(dist[0]).tolist()
    for i in range(1, n):
        d = dist[i].tolist()
        row = [0.0] * m
        row[0] = max(prev[0], d[0])
        for j in range(1, m):
            row[j] = max(min(prev[j], row[j - 1], prev[j - 1]), d[j])
        prev = row

    return float(prev[-1])
