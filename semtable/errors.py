from typing import Any, Dict


class SchedulerError(Exception):
    """Base class for timetable errors."""

    def __init__(self, message: str, details: Dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InputValidationError(SchedulerError):
    """Raised before generation when input collections are unusable."""


class EntryValidationError(SchedulerError):
    """Raised when a manual edit is missing required fields."""


class EntryNotFoundError(SchedulerError):
    """Raised when a manual edit addresses a missing or deleted entry."""

    def __init__(self, index: int):
        super().__init__(f"Timetable entry {index} not found", {"index": index})


class ConfigurationError(SchedulerError):
    """Raised when the settings file cannot be read."""
