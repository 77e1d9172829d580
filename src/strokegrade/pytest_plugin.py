"""pytest plugin for strokegrade — fixtures for checking lesson content.

Enable it from a ``conftest.py``::

    pytest_plugins = ["strokegrade.pytest_plugin"]
"""

from __future__ import annotations

from pathlib import Path

import pytest

from strokegrade.config import StrokeGradeConfig
from strokegrade.evaluators.stroke_path import StrokePathEvaluator
from strokegrade.loader import load_steps
from strokegrade.models import EvaluationResult, LessonStep, Polyline


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "strokegrade: mark a test as a lesson grading test")


@pytest.fixture(scope="session")
def strokegrade_config() -> StrokeGradeConfig:
    """Session-scoped strokegrade configuration from environment."""
    return StrokeGradeConfig()


@pytest.fixture()
def stroke_evaluator(strokegrade_config: StrokeGradeConfig) -> StrokePathEvaluator:
    """A StrokePathEvaluator using the configured default rubric."""
    return StrokePathEvaluator(default_rubric=strokegrade_config.default_rubric())


@pytest.fixture()
def grade_stroke(stroke_evaluator: StrokePathEvaluator):
    """Convenience fixture — call with a step and an attempt, returns the result.

    Automatically asserts that the attempt passed.
    """

    def _grade(step: LessonStep, attempt: Polyline) -> EvaluationResult:
        result = stroke_evaluator.evaluate(step, attempt)
        assert result.passed, (
            f"Step '{step.id}' failed: "
            f"stars={result.stars}, "
            f"frechet={result.distance:.2f}"
        )
        return result

    return _grade


@pytest.fixture(scope="session")
def all_lesson_steps(request: pytest.FixtureRequest, strokegrade_config: StrokeGradeConfig) -> list[LessonStep]:
    """Load all stroke-path steps from the lessons directory at the project root."""
    root = Path(request.config.rootpath) / strokegrade_config.lessons_dir
    if not root.is_dir():
        return []
    return load_steps(root)
