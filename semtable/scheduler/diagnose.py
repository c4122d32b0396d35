from __future__ import annotations

from typing import List, Sequence

from ..data.availability import is_available
from ..data.registry import OccupancyLedger
from ..data.slots import BREAK_SLOT, is_break_slot
from ..models.subject import Subject
from ..models.teacher import Teacher

NO_TEACHER_REASON = "No teacher associated with subject"


def _free_teachers(ledger: OccupancyLedger, teachers: Sequence[Teacher], day: str, slot: str) -> List[Teacher]:
    return [t for t in teachers if is_available(t, day, slot) and ledger.teacher_free(t.name, day, slot)]


def _free_classrooms(ledger: OccupancyLedger, classrooms: Sequence[str], day: str, slot: str) -> List[str]:
    return [c for c in classrooms if ledger.classroom_free(c, day, slot)]


def suggest_positions(
    ledger: OccupancyLedger,
    subject: Subject,
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    *,
    limit: int = 5,
    break_label: str = BREAK_SLOT,
) -> List[str]:
    out: List[str] = []
    for day in days:
        for slot in slots:
            if len(out) >= limit:
                return out
            if is_break_slot(slot, break_label):
                continue
            if ledger.cohort_blocks(subject.semester, day, slot, subject.name):
                continue
            if _free_teachers(ledger, teachers, day, slot) and _free_classrooms(ledger, classrooms, day, slot):
                out.append(f"{day} @ {slot}")
    return out


def shortfall_reasons(
    ledger: OccupancyLedger,
    subject: Subject,
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    *,
    break_label: str = BREAK_SLOT,
) -> List[str]:
    if not teachers:
        return [NO_TEACHER_REASON]
    reasons: List[str] = []
    for day in days:
        for slot in slots:
            if is_break_slot(slot, break_label):
                continue
            if not _free_teachers(ledger, teachers, day, slot):
                reasons.append(f"No available teacher at {day} {slot}")
            if not _free_classrooms(ledger, classrooms, day, slot):
                reasons.append(f"No available classroom at {day} {slot}")
            holder = ledger.cohort_holder(subject.semester, day, slot)
            if holder is not None and holder != subject.name:
                reasons.append(f"Semester busy with {holder} at {day} {slot}")
    return list(dict.fromkeys(reasons))
