import json
from pathlib import Path

import pytest

from semtable.data.loader import check_inputs, load_inputs, semester_labels
from semtable.data.slots import BREAK_SLOT
from semtable.errors import InputValidationError

ROOT = Path(__file__).resolve().parents[1]


def write_inputs(path: Path, **overrides) -> Path:
    data = {
        "teachers": [{"name": "Ada", "subjects": "Math, Physics", "availability": {"Monday": ["9:00 - 10:00"]}}],
        "subjects": [{"name": "Math", "sessions_per_week": "x"}, {"name": "Physics", "semester": "Semester 2"}],
        "classrooms": ["R1"],
        "days": ["Monday"],
        "time_slots": ["9:00 - 10:00"],
        "semesters": 2,
    }
    data.update(overrides)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_builds_typed_records(tmp_path: Path) -> None:
    inputs = load_inputs(write_inputs(tmp_path / "in.json"))
    assert inputs.teachers[0].subjects == ["Math", "Physics"]
    assert inputs.teachers[0].availability == {"Monday": ["9:00 - 10:00"]}
    math, physics = inputs.subjects
    assert (math.semester, math.sessions_per_week) == ("General", 2)
    assert physics.semester == "Semester 2"
    assert inputs.semesters == ["Semester 1", "Semester 2"]


def test_load_honours_configured_defaults(tmp_path: Path) -> None:
    inputs = load_inputs(write_inputs(tmp_path / "in.json"), default_cohort="Year 1", default_sessions=4)
    assert (inputs.subjects[0].semester, inputs.subjects[0].sessions_per_week) == ("Year 1", 4)


def test_check_inputs_returns_prepared_slots(tmp_path: Path) -> None:
    inputs = load_inputs(write_inputs(tmp_path / "in.json"))
    assert check_inputs(inputs) == ["9:00 - 10:00", BREAK_SLOT]


def test_check_inputs_fails_fast(tmp_path: Path) -> None:
    dup_slots = load_inputs(write_inputs(tmp_path / "a.json", time_slots=["9:00 - 10:00", "9:00 - 10:00"]))
    with pytest.raises(InputValidationError, match="Duplicate time slots"):
        check_inputs(dup_slots)
    dup_rooms = load_inputs(write_inputs(tmp_path / "b.json", classrooms=["R1", "R1"]))
    with pytest.raises(InputValidationError, match="Duplicate classrooms"):
        check_inputs(dup_rooms)
    no_days = load_inputs(write_inputs(tmp_path / "c.json", days=[]))
    with pytest.raises(InputValidationError, match="days and time slots"):
        check_inputs(no_days)


def test_semester_labels() -> None:
    assert semester_labels(3) == ["Semester 1", "Semester 2", "Semester 3"]
    assert semester_labels(0) == []


def test_bundled_sample_is_valid() -> None:
    inputs = load_inputs(ROOT / "data" / "inputs.json")
    slots = check_inputs(inputs)
    assert slots[0] == "9:00 AM – 10:00 AM"
    assert slots[-1] == "2:00 PM – 3:00 PM"
    assert BREAK_SLOT in slots
