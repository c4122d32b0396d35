from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Teacher:
    name: str
    subjects: List[str]
    # day -> permitted slot labels; empty means available at any time
    availability: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return self.name.strip().lower()

    def teaches(self, subject_name: str) -> bool:
        wanted = subject_name.strip().lower()
        return any((s or "").strip().lower() == wanted for s in self.subjects)
