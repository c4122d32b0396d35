from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Tuple

from .entry import TimetableEntry


@dataclass
class Timetable:
    """Ordered entry list; deleted positions keep a ``None`` so indices stay stable."""

    entries: List[TimetableEntry | None] = field(default_factory=list)

    def place(self, entry: TimetableEntry) -> int:
        self.entries.append(entry)
        return len(self.entries) - 1

    def get(self, index: int) -> TimetableEntry | None:
        if index < 0 or index >= len(self.entries):
            return None
        return self.entries[index]

    def remove(self, index: int) -> None:
        self.entries[index] = None

    def all(self) -> Iterable[TimetableEntry]:
        return [e for e in self.entries if e is not None]

    def indexed(self) -> Iterator[Tuple[int, TimetableEntry]]:
        for i, e in enumerate(self.entries):
            if e is not None:
                yield i, e

    def at(self, day: str, time_slot: str) -> List[TimetableEntry]:
        return [e for e in self.all() if e.day == day and e.time_slot == time_slot]

    def __len__(self) -> int:
        return sum(1 for e in self.entries if e is not None)
