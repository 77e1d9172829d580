"""Stroke-path evaluator — grades a freehand stroke against a guide path."""

from __future__ import annotations

import logging

from strokegrade.metrics.frechet import frechet_distance
from strokegrade.models import DEFAULT_RUBRIC, EvaluationResult, LessonStep, Polyline, Rubric
from strokegrade.resample import resample

logger = logging.getLogger(__name__)


def stars_for_distance(distance: float, star_thresholds: tuple[float, float, float]) -> int:
    """Map a distance to 0-3 stars, checking the strictest threshold first."""
    three, two, one = star_thresholds
    if distance <= three:
        return 3
    if distance <= two:
        return 2
    if distance <= one:
        return 1
    return 0


def evaluate_stroke_path(guide: Polyline, attempt: Polyline, rubric: Rubric) -> EvaluationResult:
    """Grade *attempt* against *guide* using the discrete Fréchet distance.

    Both polylines are resampled to ``rubric.resample_points`` so the
    distance compares paths of equal density. An empty guide or attempt
    yields an infinite distance, which fails with 0 stars.
    """
    n = rubric.resample_points
    g = resample(guide, n)
    a = resample(attempt, n)
    d = frechet_distance(g, a)

    stars = stars_for_distance(d, rubric.star_thresholds)
    passed = d <= rubric.max_frechet_pass
    logger.debug("stroke-path frechet=%.3f stars=%d passed=%s (n=%d)", d, stars, passed, n)

    return EvaluationResult(
        passed=passed,
        stars=stars,
        metrics={"frechet": d, "resample_points": n},
    )


class StrokePathEvaluator:
    """Evaluates stroke-path lesson steps.

    A rubric passed to the constructor overrides the rubric of every step;
    otherwise the step's own rubric is used, falling back to *default_rubric*.
    """

    def __init__(self, rubric: Rubric | None = None, *, default_rubric: Rubric = DEFAULT_RUBRIC) -> None:
        self._rubric = rubric
        self._default_rubric = default_rubric

    @property
    def name(self) -> str:
        return "stroke_path"

    def rubric_for(self, step: LessonStep) -> Rubric:
        if self._rubric is not None:
            return self._rubric
        if step.rubric is not None:
            return step.rubric
        return self._default_rubric

    def evaluate(self, step: LessonStep, attempt: Polyline) -> EvaluationResult:
        return evaluate_stroke_path(step.guide, attempt, self.rubric_for(step))
