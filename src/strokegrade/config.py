"""Configuration for strokegrade, sourced from .env file and environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from strokegrade.models import DEFAULT_RESAMPLE_POINTS, Rubric

load_dotenv()


def _thresholds_from_env() -> tuple[float, float, float]:
    raw = os.environ.get("STROKEGRADE_STAR_THRESHOLDS", "8,14,18")
    parts = [float(p) for p in raw.split(",") if p.strip()]
    if len(parts) != 3:
        raise ValueError(f"STROKEGRADE_STAR_THRESHOLDS must hold 3 numbers, got {raw!r}")
    return parts[0], parts[1], parts[2]


@dataclass
class StrokeGradeConfig:
    """Central configuration for grading defaults."""

    max_frechet_pass: float = field(
        default_factory=lambda: float(os.environ.get("STROKEGRADE_MAX_FRECHET_PASS", "18"))
    )
    star_thresholds: tuple[float, float, float] = field(default_factory=_thresholds_from_env)
    resample_points: int = field(
        default_factory=lambda: int(os.environ.get("STROKEGRADE_RESAMPLE_POINTS", str(DEFAULT_RESAMPLE_POINTS)))
    )
    lessons_dir: str = field(default_factory=lambda: os.environ.get("STROKEGRADE_LESSONS_DIR", "lessons"))
    report_json: bool = False

    def default_rubric(self) -> Rubric:
        return Rubric(
            max_frechet_pass=self.max_frechet_pass,
            star_thresholds=self.star_thresholds,
            resample_points=self.resample_points,
        )
