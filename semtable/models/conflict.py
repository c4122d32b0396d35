from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Union


@dataclass(frozen=True)
class TeacherConflict:
    """One teacher booked more than once at the same day and slot."""

    kind: ClassVar[str] = "teacher"
    day: str
    time_slot: str
    teacher: str
    subjects: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, **asdict(self)}


@dataclass(frozen=True)
class ClassroomConflict:
    """One room listed by several entries at the same day and slot."""

    kind: ClassVar[str] = "classroom"
    day: str
    time_slot: str
    classroom: str
    subjects: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, **asdict(self)}


@dataclass(frozen=True)
class StudentConflict:
    """A cohort problem.

    Either a double booking (``day``/``time_slot`` set, several distinct
    subjects) or a weekly shortfall for one subject (no position,
    ``missing_sessions`` > 0 with suggestions and reasons).
    """

    kind: ClassVar[str] = "student"
    semester: str
    subjects: List[str]
    day: str | None = None
    time_slot: str | None = None
    missing_sessions: int = 0
    suggestions: List[str] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)

    @property
    def is_shortfall(self) -> bool:
        return self.missing_sessions > 0

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, **asdict(self)}


Conflict = Union[TeacherConflict, ClassroomConflict, StudentConflict]


def conflict_from_dict(data: Dict[str, Any]) -> Conflict:
    kind = data.get("type")
    if kind == TeacherConflict.kind:
        return TeacherConflict(data["day"], data["time_slot"], data["teacher"], list(data["subjects"]))
    if kind == ClassroomConflict.kind:
        return ClassroomConflict(data["day"], data["time_slot"], data["classroom"], list(data["subjects"]))
    if kind == StudentConflict.kind:
        return StudentConflict(
            semester=data.get("semester") or "General",
            subjects=list(data.get("subjects") or []),
            day=data.get("day"),
            time_slot=data.get("time_slot"),
            missing_sessions=int(data.get("missing_sessions") or 0),
            suggestions=list(data.get("suggestions") or []),
            reasons=list(data.get("reasons") or []),
        )
    raise ValueError(f"Unknown conflict type: {kind!r}")
