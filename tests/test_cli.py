"""Tests for the strokegrade CLI."""

from __future__ import annotations

import json

import pytest

from strokegrade.cli import _resolve_step_path, main

LESSON = {
    "id": "lesson",
    "steps": [
        {
            "id": "horizontal",
            "title": "Horizontal",
            "guide": [{"x": 0, "y": 0}, {"x": 100, "y": 0}],
            "rubric": {"maxFrechetPass": 18, "starThresholds": [8, 14, 18], "resamplePoints": 64},
        },
        {
            "id": "vertical",
            "title": "Vertical",
            "guide": [{"x": 0, "y": 0}, {"x": 0, "y": 100}],
        },
    ],
}


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


# ---------------------------------------------------------------------------
# grade
# ---------------------------------------------------------------------------


def test_grade_single_polyline_passes(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempt.json", [[0, 2], [50, 2], [100, 2]])

    assert _run(["grade", str(step), str(attempt)]) == 0

    out = capsys.readouterr().out
    assert "[PASS] horizontal (Horizontal)" in out
    assert "1/1 steps passed, 3 stars" in out


def test_grade_step_id_selects_step(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempt.json", {"points": [[0, 0], [100, 0]]})

    # A horizontal stroke against the vertical guide fails.
    assert _run(["grade", str(step), str(attempt), "--step-id", "vertical"]) == 1
    assert "[FAIL] vertical" in capsys.readouterr().out


def test_grade_attempt_map_json(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json(
        "attempts.json",
        {"horizontal": [[0, 0], [100, 0]], "vertical": [[0, 0], [0, 100]]},
    )

    assert _run(["grade", str(step), str(attempt), "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in data] == ["horizontal", "vertical"]
    assert all(r["stars"] == 3 for r in data)
    assert data[0]["metrics"]["resample_points"] == 64
    assert data[1]["metrics"]["resample_points"] == 128


def test_grade_empty_attempt_fails(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempt.json", [])

    assert _run(["grade", str(step), str(attempt), "--json"]) == 1
    data = json.loads(capsys.readouterr().out)
    assert data[0]["passed"] is False
    assert data[0]["metrics"]["frechet"] is None


def test_grade_unknown_step_id(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempt.json", [[0, 0]])

    assert _run(["grade", str(step), str(attempt), "--step-id", "circle"]) == 1
    assert "circle" in capsys.readouterr().err


def test_grade_unknown_step_in_attempt_map(write_json, capsys):
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempts.json", {"spiral": [[0, 0]]})

    assert _run(["grade", str(step), str(attempt)]) == 1
    assert "unknown steps: spiral" in capsys.readouterr().err


def test_grade_missing_step_file(tmp_path, write_json, capsys):
    attempt = write_json("attempt.json", [[0, 0]])

    assert _run(["grade", str(tmp_path / "missing.json"), str(attempt)]) == 1
    assert "Step file not found" in capsys.readouterr().err


def test_grade_no_stroke_steps(write_json, capsys):
    step = write_json("fill.json", {"id": "fill", "type": "area-fill"})
    attempt = write_json("attempt.json", [[0, 0]])

    assert _run(["grade", str(step), str(attempt)]) == 1
    assert "No stroke-path steps" in capsys.readouterr().err


def test_grade_uses_configured_default_rubric(write_json, monkeypatch, capsys):
    monkeypatch.setenv("STROKEGRADE_MAX_FRECHET_PASS", "1")
    monkeypatch.setenv("STROKEGRADE_STAR_THRESHOLDS", "0.25,0.5,1")
    step = write_json("lesson.json", LESSON)
    attempt = write_json("attempt.json", [[5, 0], [5, 100]])

    # "vertical" has no rubric of its own; 5px off fails the strict default.
    assert _run(["grade", str(step), str(attempt), "--step-id", "vertical"]) == 1
    assert "[FAIL] vertical" in capsys.readouterr().out


def test_resolve_step_path_from_lessons_dir(tmp_path, monkeypatch):
    lessons = tmp_path / "lessons"
    lessons.mkdir()
    (lessons / "shapes.json").write_text(json.dumps(LESSON))
    monkeypatch.chdir(tmp_path)

    assert _resolve_step_path("shapes", "lessons") == lessons.relative_to(tmp_path) / "shapes.json"
    with pytest.raises(FileNotFoundError):
        _resolve_step_path("circles", "lessons")


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------


def test_compare_prints_all_metrics(write_json, capsys):
    a = write_json("a.json", [[0, 0], [10, 0]])
    b = write_json("b.json", [[10, 0], [0, 0]])

    assert _run(["compare", str(a), str(b)]) == 0

    out = capsys.readouterr().out
    assert "frechet: 10.000" in out
    assert "hausdorff: 0.000" in out


def test_compare_with_resample(write_json, capsys):
    a = write_json("a.json", [[0, 0], [10, 0]])
    b = write_json("b.json", [[0, 3], [2, 3], [10, 3]])

    assert _run(["compare", str(a), str(b), "--resample", "16"]) == 0
    assert "frechet: 3.000" in capsys.readouterr().out


def test_compare_missing_file(tmp_path, capsys):
    assert _run(["compare", str(tmp_path / "a.json"), str(tmp_path / "b.json")]) == 1
    assert "not found" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert _run([]) == 0
    assert "usage: strokegrade" in capsys.readouterr().out
