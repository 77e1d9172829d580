"""Checkpoint evaluator — grade a run of steps with AND/OR/threshold logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from strokegrade.evaluator import StepEvaluator
from strokegrade.models import EvaluationResult, LessonStep, Polyline

logger = logging.getLogger(__name__)

MAX_STARS = 3


class CombineMode(enum.Enum):
    AND = "and"
    OR = "or"
    THRESHOLD = "threshold"


@dataclass
class CheckpointResult:
    """Aggregate outcome of a lesson or tutorial checkpoint."""

    passed: bool
    score: float
    total_stars: int
    passed_count: int
    step_results: list[tuple[LessonStep, EvaluationResult]] = field(default_factory=list)

    @property
    def stars_earned(self) -> int:
        """Average stars per step, rounded half up."""
        if not self.step_results:
            return 0
        return int(self.total_stars / len(self.step_results) + 0.5)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "score": self.score,
            "total_stars": self.total_stars,
            "passed_count": self.passed_count,
            "stars_earned": self.stars_earned,
            "steps": [
                {"id": step.id, "title": step.title, **result.to_dict()}
                for step, result in self.step_results
            ],
        }


class CheckpointEvaluator:
    """Grades every step of a checkpoint and combines the results.

    Each step scores ``stars / 3``. In ``AND`` mode every step must pass,
    in ``OR`` mode one is enough, and in ``THRESHOLD`` mode the average
    score must reach *threshold*.
    """

    def __init__(
        self,
        evaluator: StepEvaluator,
        mode: CombineMode = CombineMode.AND,
        threshold: float = 0.7,
    ) -> None:
        self._evaluator = evaluator
        self._mode = mode
        self._threshold = threshold

    @property
    def name(self) -> str:
        return "checkpoint"

    def evaluate(self, steps: Sequence[LessonStep], attempts: Sequence[Polyline]) -> CheckpointResult:
        if len(steps) != len(attempts):
            raise ValueError(
                f"Got {len(attempts)} attempts for {len(steps)} steps"
            )

        step_results: list[tuple[LessonStep, EvaluationResult]] = []
        for step, attempt in zip(steps, attempts):
            result = self._evaluator.evaluate(step, attempt)
            logger.debug("step %s: passed=%s stars=%d", step.id, result.passed, result.stars)
            step_results.append((step, result))

        if not step_results:
            return CheckpointResult(passed=True, score=1.0, total_stars=0, passed_count=0)

        results = [r for _, r in step_results]
        avg_score = sum(r.stars / MAX_STARS for r in results) / len(results)

        if self._mode == CombineMode.AND:
            passed = all(r.passed for r in results)
        elif self._mode == CombineMode.OR:
            passed = any(r.passed for r in results)
        else:  # THRESHOLD
            passed = avg_score >= self._threshold

        return CheckpointResult(
            passed=passed,
            score=avg_score,
            total_stars=sum(r.stars for r in results),
            passed_count=sum(1 for r in results if r.passed),
            step_results=step_results,
        )
