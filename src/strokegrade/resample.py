"""Arclength-uniform resampling of polylines."""

from __future__ import annotations

import math

import numpy as np

from strokegrade.models import DEFAULT_RESAMPLE_POINTS, Point, Polyline


def _to_array(points: Polyline) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def _cumulative_lengths(xy: np.ndarray) -> np.ndarray:
    """Cumulative arclength at each vertex, accumulated in input order."""
    segments = np.hypot(np.diff(xy[:, 0]), np.diff(xy[:, 1]))
    return np.concatenate(([0.0], np.cumsum(segments)))


def path_length(points: Polyline) -> float:
    """Total arclength of *points*; 0.0 for fewer than two points."""
    if len(points) < 2:
        return 0.0
    return float(_cumulative_lengths(_to_array(points))[-1])


def resample(points: Polyline, count: int = DEFAULT_RESAMPLE_POINTS) -> list[Point]:
    """Resample *points* to *count* points evenly spaced by distance along the path.

    The first and last output points are the first and last input points
    themselves. *count* is floored and clamped to at least 2.

    Degenerate input never raises: an empty polyline resamples to an empty
    list, and a single point or a path of zero length resamples to *count*
    copies of its first point.
    """
    n = max(2, math.floor(count))
    pts = list(points)
    if not pts:
        return []
    if len(pts) == 1:
        return [pts[0]] * n

    xy = _to_array(pts)
    cumulative = _cumulative_lengths(xy)
    total = cumulative[-1]
    if total == 0:
        return [pts[0]] * n

    step = total / (n - 1)
    targets = np.arange(1, n - 1, dtype=np.float64) * step

    # First vertex whose cumulative length reaches each target.
    idx = np.searchsorted(cumulative, targets, side="left")
    overflow = idx >= len(cumulative)
    idx = np.minimum(idx, len(cumulative) - 1)

    d0 = cumulative[idx - 1]
    d1 = cumulative[idx]
    span = d1 - d0
    t = np.divide(targets - d0, span, out=np.zeros_like(targets), where=span > 0)

    p0 = xy[idx - 1]
    p1 = xy[idx]
    interior = p0 + t[:, None] * (p1 - p0)
    interior[overflow] = xy[-1]

    return [pts[0], *(Point(float(x), float(y)) for x, y in interior), pts[-1]]
