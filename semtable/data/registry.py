from __future__ import annotations

from collections import Counter
from typing import Dict, Set, Tuple


class OccupancyLedger:
    """Teacher, classroom and cohort occupancy for one generation run."""

    def __init__(self):
        # Track (teacher, day, slot) and (classroom, day, slot)
        self.teacher_busy: Set[Tuple[str, str, str]] = set()
        self.classroom_busy: Set[Tuple[str, str, str]] = set()
        # (cohort, day, slot) -> subject that claimed the cell
        self.cohort_claims: Dict[Tuple[str, str, str], str] = {}
        self.cohort_load: Counter = Counter()  # (cohort, day) -> claimed cells
        self.teacher_load: Counter = Counter()  # teacher -> booked cells

    def teacher_free(self, teacher: str, day: str, slot: str) -> bool:
        return (teacher, day, slot) not in self.teacher_busy

    def classroom_free(self, classroom: str, day: str, slot: str) -> bool:
        return (classroom, day, slot) not in self.classroom_busy

    def cohort_holder(self, cohort: str, day: str, slot: str) -> str | None:
        return self.cohort_claims.get((cohort, day, slot))

    def cohort_blocks(self, cohort: str, day: str, slot: str, subject: str) -> bool:
        holder = self.cohort_holder(cohort, day, slot)
        return holder is not None and holder != subject

    def day_load(self, cohort: str, day: str) -> int:
        return self.cohort_load[(cohort, day)]

    def load_of(self, teacher: str) -> int:
        return self.teacher_load[teacher]

    def place(self, teacher: str, classroom: str, cohort: str, subject: str, day: str, slot: str) -> None:
        self.teacher_busy.add((teacher, day, slot))
        self.teacher_load[teacher] += 1
        self.classroom_busy.add((classroom, day, slot))
        if (cohort, day, slot) not in self.cohort_claims:
            self.cohort_claims[(cohort, day, slot)] = subject
            self.cohort_load[(cohort, day)] += 1
