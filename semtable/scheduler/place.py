from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Set, Tuple

from ..data.registry import OccupancyLedger
from ..data.slots import BREAK_SLOT
from ..models.conflict import Conflict, StudentConflict
from ..models.entry import TimetableEntry
from ..models.subject import Subject
from ..models.teacher import Teacher
from ..validate.checks import detect_conflicts
from .diagnose import shortfall_reasons, suggest_positions
from .rank import Candidate, can_place, eligible_teachers, rank_candidates


@dataclass
class GenerationResult:
    entries: List[TimetableEntry] = field(default_factory=list)
    conflicts: List[Conflict] = field(default_factory=list)


def commit(ledger: OccupancyLedger, entries: List[TimetableEntry], subject: Subject, cand: Candidate) -> TimetableEntry:
    entry = TimetableEntry(
        day=cand.day,
        time_slot=cand.time_slot,
        subject=subject.name,
        teacher=cand.teacher.name,
        semester=subject.semester,
        classrooms=[cand.classroom],
        department_codes=subject.department_codes(),
    )
    entries.append(entry)
    ledger.place(cand.teacher.name, cand.classroom, subject.semester, subject.name, cand.day, cand.time_slot)
    return entry


def place_subject(
    ledger: OccupancyLedger,
    entries: List[TimetableEntry],
    subject: Subject,
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    break_label: str = BREAK_SLOT,
) -> int:
    """Greedily commit up to ``sessions_per_week`` sessions; returns how many landed."""
    logger = logging.getLogger(__name__)
    required = subject.sessions_per_week
    ranked = rank_candidates(ledger, subject, teachers, classrooms, days, slots, break_label)
    used_positions: Set[Tuple[str, str]] = set()
    used_days: Set[str] = set()
    spread = len({c.day for c in ranked}) >= required
    if not spread and ranked:
        logger.info(f"{subject.name} ({subject.semester}): one-per-day spreading relaxed")

    placed = 0
    # Pass A: at most one session per day when enough days are open
    for cand in ranked:
        if placed >= required:
            break
        pos = (cand.day, cand.time_slot)
        if pos in used_positions:
            continue
        if spread and cand.day in used_days:
            continue
        if can_place(ledger, subject, cand.teacher, cand.classroom, cand.day, cand.time_slot, break_label):
            commit(ledger, entries, subject, cand)
            used_positions.add(pos)
            used_days.add(cand.day)
            placed += 1
            logger.info(f"Place {subject.semester} {cand.day} {cand.time_slot} -> {subject.name} – {cand.teacher.name} @ {cand.classroom}")

    # Pass B: fill whatever remains; a used cell may take a parallel section
    for cand in ranked:
        if placed >= required:
            break
        if can_place(ledger, subject, cand.teacher, cand.classroom, cand.day, cand.time_slot, break_label):
            commit(ledger, entries, subject, cand)
            placed += 1
            logger.info(f"Place(fill) {subject.semester} {cand.day} {cand.time_slot} -> {subject.name} – {cand.teacher.name} @ {cand.classroom}")
    return placed


def place_subjects(
    subjects: Sequence[Subject],
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    *,
    break_label: str = BREAK_SLOT,
    max_suggestions: int = 5,
) -> Tuple[List[TimetableEntry], List[StudentConflict]]:
    logger = logging.getLogger(__name__)
    ledger = OccupancyLedger()
    entries: List[TimetableEntry] = []
    shortfalls: List[StudentConflict] = []

    for subject in subjects:
        eligible = eligible_teachers(subject, teachers)
        placed = 0
        if eligible:
            placed = place_subject(ledger, entries, subject, eligible, classrooms, days, slots, break_label)
        if placed >= subject.sessions_per_week:
            continue
        missing = subject.sessions_per_week - placed
        reasons = shortfall_reasons(ledger, subject, eligible, classrooms, days, slots, break_label=break_label)
        shortfalls.append(
            StudentConflict(
                semester=subject.semester,
                subjects=[subject.name],
                missing_sessions=missing,
                suggestions=suggest_positions(
                    ledger, subject, eligible, classrooms, days, slots,
                    limit=max_suggestions, break_label=break_label,
                ),
                reasons=reasons,
            )
        )
        logger.warning(f"Shortfall {subject.semester} {subject.name}: {missing} of {subject.sessions_per_week} unplaced")
    return entries, shortfalls


def generate_timetable(
    subjects: Sequence[Subject],
    teachers: Sequence[Teacher],
    classrooms: Sequence[str],
    days: Sequence[str],
    slots: Sequence[str],
    *,
    break_label: str = BREAK_SLOT,
    max_suggestions: int = 5,
) -> GenerationResult:
    """Place every subject, then append double-booking conflicts to the shortfalls.

    ``slots`` is expected to already contain the break label in sorted order.
    """
    entries, shortfalls = place_subjects(
        subjects, teachers, classrooms, days, slots,
        break_label=break_label, max_suggestions=max_suggestions,
    )
    conflicts: List[Conflict] = list(shortfalls)
    conflicts.extend(detect_conflicts(entries, days, slots))
    return GenerationResult(entries=entries, conflicts=conflicts)
