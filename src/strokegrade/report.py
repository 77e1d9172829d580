"""Structured reporting for graded steps — console and JSON output."""

from __future__ import annotations

import json
import math
from pathlib import Path

from strokegrade.models import EvaluationResult, LessonStep


def _format_distance(d: float) -> str:
    return f"{d:.1f}" if math.isfinite(d) else "inf"


class StructuredReport:
    """Collects step results and produces console or JSON reports."""

    def __init__(self) -> None:
        self._results: list[tuple[LessonStep, EvaluationResult]] = []

    def add(self, step: LessonStep, result: EvaluationResult) -> None:
        self._results.append((step, result))

    @property
    def all_passed(self) -> bool:
        return all(r.passed for _, r in self._results)

    @property
    def passed_count(self) -> int:
        return sum(1 for _, r in self._results if r.passed)

    @property
    def total_stars(self) -> int:
        return sum(r.stars for _, r in self._results)

    def to_console(self) -> str:
        lines: list[str] = []
        lines.append(f"\n{'='*60}")
        lines.append("STROKE GRADING REPORT")
        lines.append(f"{'='*60}")

        for step, r in self._results:
            status = "PASS" if r.passed else "FAIL"
            lines.append(f"  [{status}] {step.id} ({step.title})")
            lines.append(f"         stars: {'*' * r.stars}{'.' * (3 - r.stars)} ({r.stars}/3)")
            lines.append(f"         frechet: {_format_distance(r.distance)} px")

        lines.append(f"{'='*60}")
        lines.append(f"  {self.passed_count}/{len(self._results)} steps passed, {self.total_stars} stars")
        lines.append(f"{'='*60}\n")
        return "\n".join(lines)

    def to_dict(self) -> list[dict]:
        return [
            {
                "id": step.id,
                "title": step.title,
                "passed": r.passed,
                "stars": r.stars,
                # JSON has no infinity literal
                "metrics": {
                    k: (v if math.isfinite(v) else None) for k, v in r.metrics.items()
                },
            }
            for step, r in self._results
        ]

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(self.to_json())
