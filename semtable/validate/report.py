from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable

from ..models.conflict import ClassroomConflict, Conflict, StudentConflict, TeacherConflict


def write_session_report(snapshot: Dict[str, Any], outputs_dir: Path) -> Path:
    outputs_dir.mkdir(parents=True, exist_ok=True)
    path = outputs_dir / "session.json"
    with path.open("w", encoding="utf-8") as f:
        json.dump(snapshot, f, indent=2, ensure_ascii=False)
    return path


def describe_conflict(c: Conflict) -> str:
    subjects = ", ".join(c.subjects)
    if isinstance(c, TeacherConflict):
        return f"teacher {c.teacher} double-booked at {c.day} {c.time_slot}: {subjects}"
    if isinstance(c, ClassroomConflict):
        return f"classroom {c.classroom} double-booked at {c.day} {c.time_slot}: {subjects}"
    if isinstance(c, StudentConflict) and c.is_shortfall:
        line = f"{c.semester} {subjects}: {c.missing_sessions} session(s) unplaced"
        if c.suggestions:
            line += f" (suggested: {' | '.join(c.suggestions)})"
        return line
    return f"{c.semester} overlaps at {c.day} {c.time_slot}: {subjects}"


def format_conflict_report(conflicts: Iterable[Conflict]) -> str:
    conflicts = list(conflicts)
    if not conflicts:
        return "No conflicts detected."
    counts = Counter(c.kind for c in conflicts)
    lines: list[str] = [f"conflicts: {len(conflicts)}"]
    for kind in ("teacher", "classroom", "student"):
        lines.append(f"  - {kind}: {counts.get(kind, 0)}")
    for c in conflicts:
        lines.append(f"* {describe_conflict(c)}")
        if isinstance(c, StudentConflict):
            for reason in c.reasons[:3]:
                lines.append(f"    {reason}")
    return "\n".join(lines)
