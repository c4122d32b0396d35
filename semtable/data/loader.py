from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ..errors import InputValidationError
from ..models.subject import DEFAULT_COHORT, DEFAULT_SESSIONS_PER_WEEK, Subject, parse_sessions
from ..models.teacher import Teacher
from .slots import BREAK_SLOT, prepare_time_slots


@dataclass
class ScheduleInputs:
    teachers: List[Teacher] = field(default_factory=list)
    subjects: List[Subject] = field(default_factory=list)
    classrooms: List[str] = field(default_factory=list)
    days: List[str] = field(default_factory=list)
    time_slots: List[str] = field(default_factory=list)
    semesters: List[str] = field(default_factory=list)


def load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def teacher_from_dict(data: Dict[str, Any]) -> Teacher:
    subjects = data.get("subjects") or []
    if isinstance(subjects, str):
        subjects = [s.strip() for s in subjects.split(",")]
    availability = {
        str(day): list(slots or []) for day, slots in (data.get("availability") or {}).items()
    }
    return Teacher(
        name=str(data.get("name", "")).strip(),
        subjects=[s for s in subjects if s],
        availability=availability,
    )


def subject_from_dict(
    data: Dict[str, Any],
    *,
    default_cohort: str = DEFAULT_COHORT,
    default_sessions: int = DEFAULT_SESSIONS_PER_WEEK,
) -> Subject:
    return Subject(
        name=str(data.get("name", "")).strip(),
        semester=data.get("semester") or default_cohort,
        sessions_per_week=parse_sessions(data.get("sessions_per_week"), default_sessions),
        departments=list(data.get("departments") or []),
        teacher_id=(data.get("teacher_id") or None),
    )


def semester_labels(count: int) -> List[str]:
    return [f"Semester {i}" for i in range(1, count + 1)]


def inputs_from_dict(
    data: Dict[str, Any],
    *,
    default_cohort: str = DEFAULT_COHORT,
    default_sessions: int = DEFAULT_SESSIONS_PER_WEEK,
) -> ScheduleInputs:
    semesters = data.get("semesters") or []
    if isinstance(semesters, int):
        semesters = semester_labels(semesters)
    return ScheduleInputs(
        teachers=[teacher_from_dict(t) for t in data.get("teachers", [])],
        subjects=[
            subject_from_dict(s, default_cohort=default_cohort, default_sessions=default_sessions)
            for s in data.get("subjects", [])
        ],
        classrooms=[str(c).strip() for c in data.get("classrooms", [])],
        days=list(data.get("days", [])),
        time_slots=[str(s).strip() for s in data.get("time_slots", [])],
        semesters=list(semesters),
    )


def load_inputs(path: Path, **kwargs: Any) -> ScheduleInputs:
    return inputs_from_dict(load_json(Path(path)), **kwargs)


def check_inputs(inputs: ScheduleInputs, break_label: str = BREAK_SLOT) -> List[str]:
    """Fail fast on inputs the engine cannot index; returns the prepared slot list."""
    if not inputs.teachers or not inputs.subjects or not inputs.classrooms:
        raise InputValidationError("Please add teachers, subjects, and classrooms first")
    if not inputs.days or not inputs.time_slots:
        raise InputValidationError("Please select days and time slots")
    if not inputs.semesters:
        raise InputValidationError("Please setup semesters first")

    names = [t.key for t in inputs.teachers]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise InputValidationError(
            "Duplicate teachers detected. Please ensure each teacher is unique.",
            {"teachers": dupes},
        )
    if len(set(inputs.classrooms)) != len(inputs.classrooms):
        raise InputValidationError("Duplicate classrooms detected. Please ensure each classroom is unique.")
    if len(set(inputs.time_slots)) != len(inputs.time_slots):
        raise InputValidationError("Duplicate time slots detected. Please ensure each time slot is unique.")
    return prepare_time_slots(inputs.time_slots, break_label)
