"""Quick-Add: create several subjects sharing one time/day selection."""
from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from lesson.domain.Subject import Subject
from lesson.logic.schedule.time_utils import time_to_minutes
from lesson.utilities.constants import WEEKDAYS

__all__ = ["QuickAddValidationError", "resolve_time", "build_subjects"]

TimeSelection = Union[str, Mapping[str, str], Sequence[str], None]


class QuickAddValidationError(ValueError):
    """Carries one message per invalid field (time, days, subjects, endTime)."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


def resolve_time(time: TimeSelection, errors: Dict[str, str]) -> Tuple[str, str]:
    """Normalise a quick-pick string or a custom start/end pair.

    Problems are written into ``errors``; returns ``(start, end)`` with
    empty strings for whatever could not be resolved.
    """
    if isinstance(time, str) or time is None:
        start, end, custom = (time or '').strip(), '', False
    elif isinstance(time, Mapping):
        start, end, custom = (time.get('start') or '').strip(), (time.get('end') or '').strip(), True
    else:
        pair = list(time) + ['', '']
        start, end, custom = (pair[0] or '').strip(), (pair[1] or '').strip(), True

    if not start:
        errors['time'] = 'Please select a time'
        return '', ''
    start_minutes = time_to_minutes(start)
    if start_minutes is None:
        errors['time'] = f'Invalid time: {start}'
        return '', ''
    start = f"{start_minutes // 60:02d}:{start_minutes % 60:02d}"
    if not custom:
        return start, ''
    if not end:
        errors['endTime'] = 'End time is required'
        return start, ''
    end_minutes = time_to_minutes(end)
    if end_minutes is None:
        errors['endTime'] = f'Invalid end time: {end}'
        return start, ''
    if end_minutes <= start_minutes:
        errors['endTime'] = 'End time must be after start time'
        return start, ''
    return start, f"{end_minutes // 60:02d}:{end_minutes % 60:02d}"


def build_subjects(names: Iterable[str], days: Iterable[str], time: TimeSelection) -> List[Subject]:
    """Build one Subject per name, all on ``days`` at the resolved time.

    Every precondition is checked before raising so callers can highlight
    all invalid fields at once.
    """
    errors: Dict[str, str] = {}
    start, end = resolve_time(time, errors)

    requested = [str(d).strip().lower() for d in (days or [])]
    unknown = [d for d in requested if d not in WEEKDAYS]
    if unknown:
        errors['days'] = f"Unknown day(s): {', '.join(unknown)}"
    elif not requested:
        errors['days'] = 'Please select at least one day'
    selected_days = [d for d in WEEKDAYS if d in requested]

    clean_names: List[str] = []
    for name in names or []:
        n = (name or '').strip()
        if n and n not in clean_names:
            clean_names.append(n)
    if not clean_names:
        errors['subjects'] = 'Please select at least one subject'

    if errors:
        raise QuickAddValidationError(errors)

    subjects = []
    for name in clean_names:
        subject = Subject(name=name)
        subject.schedule(selected_days, start, end)
        subjects.append(subject)
    return subjects
