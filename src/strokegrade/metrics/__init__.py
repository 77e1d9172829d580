"""Polyline distance metrics."""

from typing import Callable

from strokegrade.metrics.frechet import frechet_distance
from strokegrade.metrics.hausdorff import hausdorff_distance
from strokegrade.models import Polyline

METRICS: dict[str, Callable[[Polyline, Polyline], float]] = {
    "frechet": frechet_distance,
    "hausdorff": hausdorff_distance,
}

__all__ = [
    "METRICS",
    "frechet_distance",
    "hausdorff_distance",
]
