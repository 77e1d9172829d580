"""Core data models for stroke grading."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

DEFAULT_RESAMPLE_POINTS = 128

STROKE_PATH = "stroke-path"


@dataclass(frozen=True)
class Point:
    """A 2D coordinate in canvas pixel space."""

    x: float
    y: float

    @classmethod
    def from_obj(cls, obj: Any) -> Point:
        """Build a point from a ``Point``, an ``{"x", "y"}`` mapping or an ``(x, y)`` pair."""
        if isinstance(obj, Point):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(x=float(obj["x"]), y=float(obj["y"]))
            except (KeyError, TypeError, ValueError) as exc:
                raise ValueError(f"Invalid point {obj!r}") from exc
        if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes)) and len(obj) == 2:
            try:
                return cls(x=float(obj[0]), y=float(obj[1]))
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Invalid point {obj!r}") from exc
        raise ValueError(f"Invalid point {obj!r}")


Polyline = Sequence[Point]


def as_polyline(points: Iterable[Any]) -> list[Point]:
    """Convert an iterable of point-like objects into a list of :class:`Point`."""
    return [Point.from_obj(p) for p in points]


@dataclass(frozen=True)
class Rubric:
    """Grading configuration for a stroke-path step.

    ``star_thresholds`` are distances, strictest first: a Fréchet distance
    at or below ``star_thresholds[0]`` earns 3 stars, at or below
    ``star_thresholds[1]`` earns 2, at or below ``star_thresholds[2]`` earns 1.
    Ordering is the rubric author's responsibility and is not checked.
    """

    max_frechet_pass: float
    star_thresholds: tuple[float, float, float]
    resample_points: int = DEFAULT_RESAMPLE_POINTS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Rubric:
        """Parse a rubric as stored in lesson JSON (camelCase) or snake_case."""
        try:
            max_pass = data["maxFrechetPass"] if "maxFrechetPass" in data else data["max_frechet_pass"]
            thresholds = data["starThresholds"] if "starThresholds" in data else data["star_thresholds"]
        except KeyError as exc:
            raise ValueError(f"Rubric is missing {exc.args[0]!r}") from exc

        if not isinstance(thresholds, Sequence) or isinstance(thresholds, str) or len(thresholds) != 3:
            raise ValueError(f"starThresholds must be a list of 3 numbers, got {thresholds!r}")

        points = data.get("resamplePoints", data.get("resample_points"))
        try:
            return cls(
                max_frechet_pass=float(max_pass),
                star_thresholds=(float(thresholds[0]), float(thresholds[1]), float(thresholds[2])),
                resample_points=DEFAULT_RESAMPLE_POINTS if points is None else int(points),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid rubric {dict(data)!r}") from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxFrechetPass": self.max_frechet_pass,
            "starThresholds": list(self.star_thresholds),
            "resamplePoints": self.resample_points,
        }


DEFAULT_RUBRIC = Rubric(max_frechet_pass=18.0, star_thresholds=(8.0, 14.0, 18.0))


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of grading one attempt against one guide."""

    passed: bool
    stars: int
    metrics: dict[str, float] = field(default_factory=dict)

    @property
    def distance(self) -> float:
        """Fréchet distance in pixels."""
        return self.metrics.get("frechet", float("inf"))

    def to_dict(self) -> dict[str, Any]:
        return {"passed": self.passed, "stars": self.stars, "metrics": dict(self.metrics)}


@dataclass(frozen=True)
class Hint:
    """A tiered hint shown to the child when a step is hard."""

    tier: int
    text: str
    action: str | None = None


@dataclass(frozen=True)
class LessonStep:
    """A single stroke-path checkpoint from a lesson or tutorial."""

    id: str
    title: str
    guide: list[Point] = field(default_factory=list)
    rubric: Rubric | None = None
    hints: list[Hint] = field(default_factory=list)
    type: str = STROKE_PATH
