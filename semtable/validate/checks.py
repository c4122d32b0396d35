from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple

from ..models.conflict import ClassroomConflict, Conflict, StudentConflict, TeacherConflict
from ..models.entry import TimetableEntry


def detect_conflicts(
    entries: Iterable[TimetableEntry | None],
    days: Sequence[str],
    time_slots: Sequence[str],
) -> List[Conflict]:
    """Full re-scan of ``entries`` for double bookings.

    For each (day, slot) in the given order: a teacher or classroom used by
    more than one entry, or a cohort holding more than one distinct subject,
    yields one conflict. Deleted (``None``) entries are ignored.
    """
    by_cell: Dict[Tuple[str, str], List[TimetableEntry]] = defaultdict(list)
    for e in entries:
        if e is not None:
            by_cell[(e.day, e.time_slot)].append(e)

    conflicts: List[Conflict] = []
    for day in days:
        for slot in time_slots:
            cell = by_cell.get((day, slot))
            if not cell:
                continue
            teacher_map: Dict[str, List[str]] = defaultdict(list)
            classroom_map: Dict[str, List[str]] = defaultdict(list)
            cohort_map: Dict[str, List[str]] = defaultdict(list)
            for e in cell:
                teacher_map[e.teacher].append(e.subject)
                for c in e.classrooms:
                    classroom_map[c].append(e.subject)
                cohort_map[e.semester].append(e.subject)

            for teacher, subjects in teacher_map.items():
                if len(subjects) > 1:
                    conflicts.append(TeacherConflict(day, slot, teacher, subjects))
            for classroom, subjects in classroom_map.items():
                if len(subjects) > 1:
                    conflicts.append(ClassroomConflict(day, slot, classroom, subjects))
            for cohort, subjects in cohort_map.items():
                unique = list(dict.fromkeys(subjects))
                if len(unique) > 1:
                    conflicts.append(StudentConflict(semester=cohort, subjects=unique, day=day, time_slot=slot))
    return conflicts
