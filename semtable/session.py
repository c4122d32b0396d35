from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from .config import Settings
from .data.loader import ScheduleInputs, check_inputs
from .data.slots import is_break_slot
from .errors import EntryNotFoundError, EntryValidationError
from .models.conflict import Conflict
from .models.entry import TimetableEntry
from .models.timetable import Timetable
from .scheduler import generate_timetable
from .validate.checks import detect_conflicts

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return uuid.uuid4().hex[:8]


class TimetableSession:
    """Owns one generated timetable, its conflicts and the edits made to it.

    Manual edits never consult occupancy; they mutate the entry list and then
    rescan it, so double bookings show up as conflicts instead of being refused.
    Callers exposing a session to several clients must serialize access.
    """

    def __init__(self, inputs: ScheduleInputs, settings: Settings | None = None, session_id: str | None = None):
        self.inputs = inputs
        self.settings = settings or Settings()
        self.session_id = session_id or new_session_id()
        self.timetable = Timetable()
        self.conflicts: List[Conflict] = []
        self.time_slots: List[str] = []
        self.last_updated: str | None = None

    @property
    def days(self) -> List[str]:
        return list(self.inputs.days)

    def generate(self) -> List[Conflict]:
        slots = check_inputs(self.inputs, self.settings.break_slot)
        result = generate_timetable(
            self.inputs.subjects,
            self.inputs.teachers,
            self.inputs.classrooms,
            self.inputs.days,
            slots,
            break_label=self.settings.break_slot,
            max_suggestions=self.settings.max_suggestions,
        )
        self.time_slots = slots
        self.timetable = Timetable(list(result.entries))
        self.conflicts = result.conflicts
        self._touch()
        logger.info(
            f"Session {self.session_id}: {len(self.timetable)} entries, {len(self.conflicts)} conflicts"
        )
        return self.conflicts

    def _touch(self) -> None:
        self.last_updated = datetime.now(timezone.utc).isoformat()

    def _reconcile(self) -> List[Conflict]:
        self.conflicts = detect_conflicts(self.timetable.entries, self.days, self.time_slots)
        self._touch()
        return self.conflicts

    def _entry(self, index: int) -> TimetableEntry:
        entry = self.timetable.get(index)
        if entry is None:
            raise EntryNotFoundError(index)
        return entry

    def _classrooms(self, classrooms: Sequence[str] | None) -> List[str]:
        chosen = [c for c in (classrooms or []) if c and c.strip()]
        if chosen:
            return chosen
        if self.settings.fallback_classroom:
            return [self.settings.fallback_classroom]
        raise EntryValidationError("At least one classroom is required")

    def _validate_fields(self, subject: str, teacher: str, semester: str) -> None:
        for label, value in (("Subject", subject), ("Teacher", teacher), ("Semester", semester)):
            if not (value or "").strip():
                raise EntryValidationError(f"{label} is required", {"field": label.lower()})

    def move(self, index: int, day: str, time_slot: str) -> List[Conflict]:
        entry = self._entry(index)
        if is_break_slot(time_slot, self.settings.break_slot):
            logger.warning(f"Cannot move entry {index} into break slot {time_slot}")
            return self.conflicts
        entry.day = day
        entry.time_slot = time_slot
        logger.info(f"Moved entry {index} ({entry.subject}) to {day} {time_slot}")
        return self._reconcile()

    def add(
        self,
        day: str,
        time_slot: str,
        subject: str,
        teacher: str,
        semester: str,
        classrooms: Sequence[str] | None = None,
        description: str | None = None,
        department_codes: Sequence[str] | None = None,
    ) -> List[Conflict]:
        self._validate_fields(subject, teacher, semester)
        if is_break_slot(time_slot, self.settings.break_slot):
            raise EntryValidationError(f"Cannot add a class into break slot {time_slot}")
        rooms = self._classrooms(classrooms)
        index = self.timetable.place(
            TimetableEntry(
                day=day,
                time_slot=time_slot,
                subject=subject.strip(),
                teacher=teacher.strip(),
                semester=semester.strip(),
                classrooms=rooms,
                department_codes=list(department_codes or []),
                description=(description or "").strip() or None,
            )
        )
        logger.info(f"Added entry {index} ({subject}) at {day} {time_slot}")
        return self._reconcile()

    def edit(
        self,
        index: int,
        subject: str,
        teacher: str,
        semester: str,
        classrooms: Sequence[str] | None = None,
        description: str | None = None,
        department_codes: Sequence[str] | None = None,
    ) -> List[Conflict]:
        entry = self._entry(index)
        self._validate_fields(subject, teacher, semester)
        rooms = self._classrooms(classrooms)
        entry.subject = subject.strip()
        entry.teacher = teacher.strip()
        entry.semester = semester.strip()
        entry.classrooms = rooms
        entry.description = (description or "").strip() or None
        entry.department_codes = list(department_codes or [])
        logger.info(f"Edited entry {index} ({entry.subject})")
        return self._reconcile()

    def delete(self, index: int) -> List[Conflict]:
        entry = self._entry(index)
        self.timetable.remove(index)
        logger.info(f"Deleted entry {index} ({entry.subject})")
        return self._reconcile()

    def metadata(self) -> Dict[str, Any]:
        return {
            "classrooms": list(self.inputs.classrooms),
            "days": self.days,
            "timeSlots": list(self.time_slots),
            "semesters": list(self.inputs.semesters),
        }

    def snapshot(self) -> Dict[str, Any]:
        return {
            "session_id": self.session_id,
            "last_updated": self.last_updated,
            "entries": [e.to_dict() if e is not None else None for e in self.timetable.entries],
            "conflicts": [c.to_dict() for c in self.conflicts],
            "metadata": self.metadata(),
        }


class SessionStore:
    """In-memory map from opaque session ids to sessions."""

    def __init__(self):
        self._sessions: Dict[str, TimetableSession] = {}

    def create(self, inputs: ScheduleInputs, settings: Settings | None = None) -> TimetableSession:
        session = TimetableSession(inputs, settings)
        while session.session_id in self._sessions:
            session.session_id = new_session_id()
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> TimetableSession | None:
        return self._sessions.get(session_id)

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
