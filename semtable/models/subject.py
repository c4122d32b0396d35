from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List

DEFAULT_SESSIONS_PER_WEEK = 2
DEFAULT_COHORT = "General"

_DASHES = re.compile(r"[–—-]")


def parse_sessions(raw: Any, default: int = DEFAULT_SESSIONS_PER_WEEK) -> int:
    """Coerce a weekly session target; anything unusable becomes ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value > 0 else default


def department_code(descriptor: str) -> str:
    raw = str(descriptor).strip()
    if not raw:
        return ""
    parts = _DASHES.split(raw, maxsplit=1)
    if len(parts) > 1:
        return parts[0].strip()
    return raw.split()[0]


@dataclass(frozen=True)
class Subject:
    name: str
    semester: str = DEFAULT_COHORT
    sessions_per_week: int = DEFAULT_SESSIONS_PER_WEEK
    departments: List[str] = field(default_factory=list)
    teacher_id: str | None = None

    def department_codes(self) -> List[str]:
        codes = [department_code(d) for d in self.departments]
        return list(dict.fromkeys(c for c in codes if c))
