from ..models.teacher import Teacher


def is_available(teacher: Teacher, day: str, time_slot: str) -> bool:
    # No declared availability means any day and slot
    if not teacher.availability:
        return True
    return time_slot in teacher.availability.get(day, [])
