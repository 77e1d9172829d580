"""strokegrade — grade freehand strokes against guide paths."""

from strokegrade.config import StrokeGradeConfig
from strokegrade.evaluator import StepEvaluator
from strokegrade.evaluators.checkpoint import CheckpointEvaluator, CheckpointResult, CombineMode
from strokegrade.evaluators.stroke_path import StrokePathEvaluator, evaluate_stroke_path
from strokegrade.loader import load_attempts_file, load_polyline_file, load_step_file, load_steps
from strokegrade.metrics import frechet_distance, hausdorff_distance
from strokegrade.models import DEFAULT_RUBRIC, EvaluationResult, Hint, LessonStep, Point, Rubric, as_polyline
from strokegrade.report import StructuredReport
from strokegrade.resample import path_length, resample

__all__ = [
    "CheckpointEvaluator",
    "CheckpointResult",
    "CombineMode",
    "DEFAULT_RUBRIC",
    "EvaluationResult",
    "Hint",
    "LessonStep",
    "Point",
    "Rubric",
    "StepEvaluator",
    "StrokeGradeConfig",
    "StrokePathEvaluator",
    "StructuredReport",
    "as_polyline",
    "evaluate_stroke_path",
    "frechet_distance",
    "hausdorff_distance",
    "load_attempts_file",
    "load_polyline_file",
    "load_step_file",
    "load_steps",
    "path_length",
    "resample",
]
