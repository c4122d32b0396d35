import json
from pathlib import Path

from semtable.models import ClassroomConflict, StudentConflict, TeacherConflict
from semtable.validate.report import format_conflict_report, write_session_report


def test_empty_report() -> None:
    assert format_conflict_report([]) == "No conflicts detected."


def test_report_sections() -> None:
    text = format_conflict_report(
        [
            TeacherConflict("Monday", "9:00 - 10:00", "Ada", ["Math", "Art"]),
            ClassroomConflict("Monday", "9:00 - 10:00", "R1", ["Math", "Art"]),
            StudentConflict(
                semester="S1",
                subjects=["Physics"],
                missing_sessions=2,
                suggestions=["Friday @ 9:00 - 10:00"],
                reasons=["No available teacher at Monday 9:00 - 10:00"],
            ),
        ]
    )
    assert "conflicts: 3" in text
    assert "  - student: 1" in text
    assert "teacher Ada double-booked at Monday 9:00 - 10:00: Math, Art" in text
    assert "S1 Physics: 2 session(s) unplaced (suggested: Friday @ 9:00 - 10:00)" in text
    assert "    No available teacher at Monday 9:00 - 10:00" in text


def test_write_session_report(tmp_path: Path) -> None:
    path = write_session_report({"entries": [], "conflicts": []}, tmp_path / "out")
    assert path.name == "session.json"
    assert json.loads(path.read_text(encoding="utf-8")) == {"entries": [], "conflicts": []}
