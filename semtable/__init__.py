"""Cohort timetable generation: greedy placement plus conflict re-validation."""

__version__ = "0.3.0"
