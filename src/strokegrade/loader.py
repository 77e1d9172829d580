"""Lesson loader — reads stroke-path steps and attempts from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from strokegrade.models import STROKE_PATH, Hint, LessonStep, Point, Rubric, as_polyline

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path.name}: {exc}") from exc


def _parse_points(raw: Any, where: str) -> list[Point]:
    if not isinstance(raw, list):
        raise ValueError(f"{where} must be a list of points, got {type(raw).__name__}")
    try:
        return as_polyline(raw)
    except ValueError as exc:
        raise ValueError(f"{where}: {exc}") from exc


def _parse_step(raw: Any, where: str) -> LessonStep:
    if not isinstance(raw, dict):
        raise ValueError(f"{where} is {type(raw).__name__}, expected an object")
    if "id" not in raw:
        raise ValueError(f"{where} is missing 'id'")
    if "guide" not in raw:
        raise ValueError(f"{where} ({raw['id']}) is missing 'guide'")

    rubric = None
    if raw.get("rubric") is not None:
        if not isinstance(raw["rubric"], dict):
            raise ValueError(f"{where} ({raw['id']}) rubric must be an object")
        rubric = Rubric.from_dict(raw["rubric"])

    try:
        hints = [
            Hint(tier=int(h["tier"]), text=str(h.get("text", "")), action=h.get("action"))
            for h in raw.get("hints") or []
        ]
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{where} ({raw['id']}) has an invalid hint") from exc

    return LessonStep(
        id=str(raw["id"]),
        title=str(raw.get("title", raw["id"])),
        guide=_parse_points(raw["guide"], f"{where} guide"),
        rubric=rubric,
        hints=hints,
    )


def load_step_file(filepath: str | Path) -> list[LessonStep]:
    """Load stroke-path steps from a single JSON file.

    The file holds either a single step object or a lesson object with a
    ``steps`` array. Steps of other types (area fill, dot-to-dot, ...) are
    skipped.

    Parameters
    ----------
    filepath:
        Path to the ``.json`` file.

    Returns
    -------
    list[LessonStep]
        The stroke-path steps defined in the file, in file order.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    ValueError
        If the file is not valid JSON or a step is malformed.
    """
    path = Path(filepath)
    data = _read_json(path)

    if isinstance(data, dict) and "steps" in data:
        raw_steps = data["steps"]
        if not isinstance(raw_steps, list):
            raise ValueError(
                f"steps in {path.name} must be a list, got {type(raw_steps).__name__}"
            )
    else:
        raw_steps = [data]

    steps: list[LessonStep] = []
    for i, raw in enumerate(raw_steps):
        where = f"steps[{i}] in {path.name}"
        step_type = raw.get("type", STROKE_PATH) if isinstance(raw, dict) else STROKE_PATH
        if step_type != STROKE_PATH:
            logger.debug("Skipping %s step %s", step_type, where)
            continue
        steps.append(_parse_step(raw, where))

    return steps


def load_steps(directory: str | Path) -> list[LessonStep]:
    """Load all stroke-path steps from JSON files in *directory*.

    Files starting with ``_`` are ignored.

    Raises
    ------
    FileNotFoundError
        If *directory* does not exist.
    ValueError
        If a file is malformed.
    """
    path = Path(directory)
    if not path.is_dir():
        raise FileNotFoundError(f"Lesson directory not found: {path}")

    steps: list[LessonStep] = []

    for json_file in sorted(path.glob("*.json")):
        if json_file.name.startswith("_"):
            continue
        steps.extend(load_step_file(json_file))

    return steps


def load_polyline_file(filepath: str | Path) -> list[Point]:
    """Load a polyline from a JSON list of points or an object with a ``points`` list."""
    path = Path(filepath)
    data = _read_json(path)
    if isinstance(data, dict):
        if "points" not in data:
            raise ValueError(f"{path.name} is missing a 'points' list")
        data = data["points"]
    return _parse_points(data, path.name)


def load_attempts_file(filepath: str | Path) -> dict[str, list[Point]]:
    """Load a JSON object mapping step ids to attempt polylines."""
    path = Path(filepath)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must map step ids to polylines")
    return {str(k): _parse_points(v, f"{path.name}[{k}]") for k, v in data.items()}
