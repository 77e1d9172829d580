"""Built-in evaluators for strokegrade."""

from strokegrade.evaluators.checkpoint import CheckpointEvaluator, CheckpointResult, CombineMode
from strokegrade.evaluators.stroke_path import StrokePathEvaluator, evaluate_stroke_path

__all__ = [
    "CheckpointEvaluator",
    "CheckpointResult",
    "CombineMode",
    "StrokePathEvaluator",
    "evaluate_stroke_path",
]
