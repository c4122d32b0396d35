from .place import GenerationResult, generate_timetable, place_subjects
from .rank import eligible_teachers, rank_candidates, rank_day_slots

__all__ = [
    "GenerationResult",
    "generate_timetable",
    "place_subjects",
    "eligible_teachers",
    "rank_candidates",
    "rank_day_slots",
]
