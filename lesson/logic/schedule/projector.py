"""Schedule projection: subjects -> ordered per-day occurrences.

Both the list endpoint and the grid page go through ``project`` so the two
views always agree on order and color.
"""
from __future__ import annotations
from typing import Dict, Iterable, List

from lesson.domain.Occurrence import Occurrence
from lesson.domain.Subject import Subject
from lesson.utilities.constants import COLOR_PALETTE, WEEKDAYS

__all__ = ["color_tag", "project", "project_week"]


def color_tag(name: str) -> str:
    """Palette entry picked from the first character of the name."""
    if not name:
        return COLOR_PALETTE[0]
    return COLOR_PALETTE[ord(name[0]) % len(COLOR_PALETTE)]


def project(subjects: Iterable[Subject], day: str) -> List[Occurrence]:
    """Occurrences of ``day`` ordered by start time.

    Ties keep collection order: ``sorted`` is guaranteed stable.
    """
    scheduled = [s for s in subjects if day in s.selected_days and s.time_for(day)]
    scheduled = sorted(scheduled, key=lambda s: s.time_for(day))
    result: List[Occurrence] = []
    for subject in scheduled:
        start = subject.time_for(day)
        end = subject.end_time or start
        result.append(Occurrence(subject, day, start, end, color_tag(subject.name)))
    return result


def project_week(subjects: Iterable[Subject]) -> Dict[str, List[Occurrence]]:
    subjects = list(subjects)
    return {day: project(subjects, day) for day in WEEKDAYS}
