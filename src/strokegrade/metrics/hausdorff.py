"""Symmetric Hausdorff distance between two point sets."""

from __future__ import annotations

from strokegrade.metrics.frechet import pairwise_distances
from strokegrade.models import Polyline


def hausdorff_distance(a: Polyline, b: Polyline) -> float:
    """Largest distance from any vertex of one polyline to the nearest vertex of the other.

    Ignores traversal order, so it is always ``<=`` the discrete Fréchet
    distance. Returns ``inf`` when either polyline is empty.
    """
    if len(a) == 0 or len(b) == 0:
        return float("inf")

    dist = pairwise_distances(a, b)
    return float(max(dist.min(axis=1).max(), dist.min(axis=0).max()))
