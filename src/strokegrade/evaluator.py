"""Evaluator protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from strokegrade.models import EvaluationResult, LessonStep, Polyline


@runtime_checkable
class StepEvaluator(Protocol):
    """Protocol for evaluators that grade an attempt at a lesson step."""

    @property
    def name(self) -> str: ...

    def evaluate(self, step: LessonStep, attempt: Polyline) -> EvaluationResult: ...
