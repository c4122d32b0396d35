from __future__ import annotations

import re
from typing import Iterable, List, Tuple

BREAK_SLOT = "11:30 – 01:00"

_RANGE_SEPARATOR = re.compile(r"[–—-]")
_CLOCK = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2}))?")


def split_range(label: str) -> Tuple[str, str]:
    parts = _RANGE_SEPARATOR.split(label, maxsplit=1)
    if len(parts) == 1:
        return parts[0].strip(), ""
    return parts[0].strip(), parts[1].strip()


def slot_sort_key(label: str) -> int:
    """Minutes since midnight for the start of ``label``; 0 when unparseable.

    Only the text before the range separator counts. ``PM`` adds twelve hours
    except at 12, ``AM`` maps 12 to 0, and a bare hour in [1, 7) is read as
    afternoon.
    """
    try:
        start, _ = split_range(label)
        marker = start.upper().replace(".", "")
        is_pm = "PM" in marker
        is_am = "AM" in marker
        m = _CLOCK.match(start)
        if m is None:
            return 0
        hour = int(m.group(1))
        minute = int(m.group(2) or 0)
    except (TypeError, AttributeError, ValueError):
        return 0
    if is_pm:
        if hour != 12:
            hour += 12
    elif is_am:
        if hour == 12:
            hour = 0
    elif 1 <= hour < 7:
        hour += 12
    return hour * 60 + minute


def sort_time_slots(labels: Iterable[str]) -> List[str]:
    unique = list(dict.fromkeys(labels))
    return sorted(unique, key=slot_sort_key)


def is_break_slot(label: str, break_label: str = BREAK_SLOT) -> bool:
    if label == break_label:
        return True
    start, end = split_range(label)
    b_start, b_end = split_range(break_label)
    if not end or not b_end:
        return False
    return start == b_start and end.startswith(b_end)


def prepare_time_slots(labels: Iterable[str], break_label: str = BREAK_SLOT) -> List[str]:
    slots = list(labels)
    if break_label not in slots:
        slots.append(break_label)
    return sort_time_slots(slots)
