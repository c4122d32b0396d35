from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..data.availability import is_available
from ..data.registry import OccupancyLedger
from ..data.slots import BREAK_SLOT, is_break_slot
from ..models.subject import Subject
from ..models.teacher import Teacher


def order_key(primary: int, day_idx: int, slot_idx: int, *tail: str) -> Tuple:
    """Composite ranking key shared by day/slot ranking and candidate ranking.

    Ascending by a primary score, then day position, then slot position,
    then any textual tie-breakers. Distinct inputs never compare equal.
    """
    return (primary, day_idx, slot_idx, *tail)


@dataclass(frozen=True)
class Candidate:
    day: str
    time_slot: str
    teacher: Teacher
    classroom: str


def eligible_teachers(subject: Subject, teachers: Sequence[Teacher]) -> List[Teacher]:
    # A pinned teacher_id wins even when that teacher does not list the subject
    if subject.teacher_id:
        pinned = subject.teacher_id.strip().lower()
        return [t for t in teachers if t.key == pinned]
    return [t for t in teachers if t.teaches(subject.name)]


def can_place(
    ledger: OccupancyLedger,
    subject: Subject,
    teacher: Teacher,
    classroom: str,
    day: str,
    slot: str,
    break_label: str = BREAK_SLOT,
) -> bool:
    if is_break_slot(slot, break_label):
        return False
    if not ledger.teacher_free(teacher.name, day, slot):
        return False
    if not ledger.classroom_free(classroom, day, slot):
        return False
    if ledger.cohort_blocks(subject.semester, day, slot, subject.name):
        return False
    return is_available(teacher, day, slot)


def rank_day_slots(
    ledger: OccupancyLedger, cohort: str, days: Sequence[str], slots: Sequence[str]
) -> List[Tuple[str, str]]:
    # Lightly loaded days first so a cohort spreads across the week
    keyed = [
        (order_key(ledger.day_load(cohort, d) * 10, di, si), d, s)
        for di, d in enumerate(days)
        for si, s in enumerate(slots)
    ]
    keyed.sort(key=lambda x: x[0])
    return [(d, s) for _, d, s in keyed]


def rank_candidates(
    ledger: OccupancyLedger,
    subject: Subject,
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    break_label: str = BREAK_SLOT,
) -> List[Candidate]:
    """Every feasible (day, slot, teacher, classroom) for ``subject``, best first.

    Order: teacher weekly load, day position, slot position, teacher name
    (case-insensitive), classroom.
    """
    day_idx = {d: i for i, d in enumerate(days)}
    slot_idx = {s: i for i, s in enumerate(slots)}
    keyed: List[Tuple[Tuple, Candidate]] = []
    for day, slot in rank_day_slots(ledger, subject.semester, days, slots):
        for t in teachers:
            if not is_available(t, day, slot):
                continue
            for c in classrooms:
                if not can_place(ledger, subject, t, c, day, slot, break_label):
                    continue
                key = order_key(ledger.load_of(t.name), day_idx[day], slot_idx[slot], t.name.lower(), c)
                keyed.append((key, Candidate(day, slot, t, c)))
    keyed.sort(key=lambda x: x[0])
    return [cand for _, cand in keyed]
