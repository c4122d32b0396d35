from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


@dataclass
class TimetableEntry:
    day: str
    time_slot: str
    subject: str
    teacher: str
    semester: str
    classrooms: List[str] = field(default_factory=list)
    department_codes: List[str] = field(default_factory=list)
    description: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimetableEntry":
        return cls(
            day=data["day"],
            time_slot=data["time_slot"],
            subject=data["subject"],
            teacher=data["teacher"],
            semester=data.get("semester") or "General",
            classrooms=list(data.get("classrooms") or []),
            department_codes=list(data.get("department_codes") or []),
            description=data.get("description"),
        )
