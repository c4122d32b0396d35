# Re-export common types
from .conflict import ClassroomConflict, Conflict, StudentConflict, TeacherConflict
from .entry import TimetableEntry
from .subject import Subject
from .teacher import Teacher
from .timetable import Timetable

__all__ = [
    "Subject",
    "Teacher",
    "TimetableEntry",
    "Timetable",
    "Conflict",
    "TeacherConflict",
    "ClassroomConflict",
    "StudentConflict",
]
