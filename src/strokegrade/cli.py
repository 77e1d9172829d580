"""strokegrade CLI — grade stroke attempts from the command line."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from strokegrade.config import StrokeGradeConfig
from strokegrade.evaluators.stroke_path import StrokePathEvaluator
from strokegrade.loader import load_attempts_file, load_polyline_file, load_step_file
from strokegrade.metrics import METRICS
from strokegrade.models import LessonStep, Point
from strokegrade.report import StructuredReport
from strokegrade.resample import resample

logger = logging.getLogger("strokegrade")


def _resolve_step_path(name: str, lessons_dir: str) -> Path:
    """Resolve a step name to a file path.

    Uses *name* directly if it exists, otherwise looks for
    ``<lessons_dir>/<name>.json``.
    """
    p = Path(name)
    if p.is_file():
        return p
    candidate = Path(lessons_dir) / f"{name}.json"
    if candidate.is_file():
        return candidate
    raise FileNotFoundError(f"Step file not found: {name}")


def _pair_attempts(
    steps: list[LessonStep], attempt_path: Path, step_id: str | None
) -> list[tuple[LessonStep, list[Point]]]:
    """Match attempts to steps.

    An attempt file holding an object keyed by step id grades every listed
    step; a plain polyline grades *step_id* or, if unset, the first step.
    """
    raw = json.loads(attempt_path.read_text())
    by_id = {s.id: s for s in steps}

    if isinstance(raw, dict) and "points" not in raw:
        attempts = load_attempts_file(attempt_path)
        unknown = sorted(set(attempts) - set(by_id))
        if unknown:
            raise ValueError(f"Attempts for unknown steps: {', '.join(unknown)}")
        return [(by_id[k], v) for k, v in attempts.items()]

    if step_id is not None:
        if step_id not in by_id:
            raise ValueError(f"Step {step_id!r} not found")
        step = by_id[step_id]
    else:
        step = steps[0]
    return [(step, load_polyline_file(attempt_path))]


def _grade_command(args: argparse.Namespace, config: StrokeGradeConfig) -> int:
    """Execute the ``grade`` subcommand."""
    try:
        step_path = _resolve_step_path(args.step, config.lessons_dir)
        steps = load_step_file(step_path)
        if not steps:
            print(f"No stroke-path steps found in {step_path}", file=sys.stderr)
            return 1
        pairs = _pair_attempts(steps, Path(args.attempt), args.step_id)
    except (FileNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    evaluator = StrokePathEvaluator(default_rubric=config.default_rubric())
    report = StructuredReport()
    for step, attempt in pairs:
        logger.info("Grading step: %s", step.id)
        report.add(step, evaluator.evaluate(step, attempt))

    if args.json or config.report_json:
        print(report.to_json())
    else:
        print(report.to_console())

    return 0 if report.all_passed else 1


def _compare_command(args: argparse.Namespace) -> int:
    """Execute the ``compare`` subcommand."""
    try:
        a = load_polyline_file(args.a)
        b = load_polyline_file(args.b)
    except (FileNotFoundError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.resample is not None:
        a = resample(a, args.resample)
        b = resample(b, args.resample)

    for name, metric in METRICS.items():
        print(f"{name}: {metric(a, b):.3f}")
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``strokegrade`` CLI."""
    parser = argparse.ArgumentParser(prog="strokegrade", description="strokegrade — freehand stroke grader")
    sub = parser.add_subparsers(dest="command")

    grade_parser = sub.add_parser("grade", help="Grade an attempt against a lesson step")
    grade_parser.add_argument("step", help="Step/lesson JSON file, or a name under the lessons directory")
    grade_parser.add_argument("attempt", help="Attempt JSON: a polyline, or an object of step id -> polyline")
    grade_parser.add_argument("--step-id", default=None, help="Step to grade a single polyline against (default: first)")
    grade_parser.add_argument("--json", action="store_true", help="Output JSON to stdout")
    grade_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    compare_parser = sub.add_parser("compare", help="Print distances between two polylines")
    compare_parser.add_argument("a", help="First polyline JSON file")
    compare_parser.add_argument("b", help="Second polyline JSON file")
    compare_parser.add_argument("--resample", type=int, default=None, help="Resample both polylines to N points first")
    compare_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    if args.command == "grade":
        exit_code = _grade_command(args, StrokeGradeConfig())
    elif args.command == "compare":
        exit_code = _compare_command(args)
    else:
        parser.print_help()
        exit_code = 0

    sys.exit(exit_code)
