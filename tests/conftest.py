"""Shared test fixtures — polyline builders, rubrics and lesson files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from strokegrade.models import LessonStep, Point, Rubric

pytest_plugins = ["strokegrade.pytest_plugin"]


def make_line(x0: float, y0: float, x1: float, y1: float, n: int = 10) -> list[Point]:
    """*n* evenly spaced points from ``(x0, y0)`` to ``(x1, y1)``."""
    return [
        Point(x0 + (i / (n - 1)) * (x1 - x0), y0 + (i / (n - 1)) * (y1 - y0))
        for i in range(n)
    ]


@pytest.fixture()
def line():
    """Factory fixture for straight polylines."""
    return make_line


@pytest.fixture()
def rubric() -> Rubric:
    return Rubric(max_frechet_pass=18, star_thresholds=(8, 14, 18), resample_points=64)


@pytest.fixture()
def straight_step(rubric: Rubric) -> LessonStep:
    return LessonStep(id="straight", title="Straight line", guide=make_line(0, 0, 100, 0, 20), rubric=rubric)


@pytest.fixture()
def write_json(tmp_path: Path):
    """Factory fixture — write *data* as JSON to ``tmp_path/name`` and return the path."""

    def _write(name: str, data) -> Path:
        p = tmp_path / name
        p.write_text(json.dumps(data))
        return p

    return _write
