"""Subject domain entity: a recurring named lesson scheduled on weekdays.

The per-day start times of the selected days (in selection order) and an
optional shared end time are the only stored schedule state. ``times``,
``selected_days``, ``days_per_week`` and ``start_time`` are derived from them
so the two wire shapes can never drift apart.
"""
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from lesson.logic.schedule.time_utils import time_to_minutes
from lesson.utilities.constants import WEEKDAYS


class Subject:
    def __init__(self, name: str = "", day_times: Optional[Dict[str, str]] = None, end_time: str = "",
                 resources: Optional[Dict[str, str]] = None, id: Optional[str] = None):
        self._id = id or str(uuid4())
        self.name = name
        self.end_time = end_time or ""
        self._day_times: Dict[str, str] = {}
        for day, time in (day_times or {}).items():
            self.set_day_time(day, time)
        r = resources or {}
        self.resources = {
            'bookLink': r.get('bookLink', '') or '',
            'googleDocLink': r.get('googleDocLink', '') or '',
        }

    @property
    def id(self) -> str:
        return self._id

    def __str__(self) -> str:
        days = ", ".join(f"{d} {t or '?'}" for d, t in self._day_times.items())
        return f"{self.name} - {self.days_per_week} day(s) - {days or 'unscheduled'}"

    __repr__ = __str__

    # --- schedule -------------------------------------------------------
    @property
    def selected_days(self) -> List[str]:
        return list(self._day_times)

    @property
    def days_per_week(self) -> int:
        return len(self._day_times)

    @property
    def times(self) -> Dict[str, str]:
        return {day: self._day_times.get(day, "") for day in WEEKDAYS}

    @property
    def start_time(self) -> str:
        """Shared start time, or '' when days disagree or nothing is scheduled."""
        values = set(self._day_times.values())
        if len(values) == 1:
            return values.pop()
        return ""

    def time_for(self, day: str) -> str:
        return self._day_times.get(day, "")

    def set_day_time(self, day: str, time: str):
        '''Select ``day`` (if not yet selected) and set its start time.'''
        day = (day or "").strip().lower()
        if day not in WEEKDAYS:
            raise ValueError(f"Unknown weekday: {day!r}")
        self._day_times[day] = time or ""

    def unschedule(self, day: str):
        self._day_times.pop(day, None)

    def schedule(self, days: Iterable[str], start_time: str, end_time: str = ""):
        '''Replace the schedule with one shared start/end on ``days``.'''
        self._day_times = {}
        for day in days:
            self.set_day_time(day, start_time)
        self.end_time = end_time or ""

    def validate(self) -> Dict[str, str]:
        """Return field -> message for every broken invariant (empty when valid)."""
        errors: Dict[str, str] = {}
        if not (self.name or "").strip():
            errors['name'] = 'Subject name is required'
        if not self._day_times:
            errors['days'] = 'Please select at least one day'
        for day, time in self._day_times.items():
            if not time:
                errors['times'] = f'Start time is required for {day}'
                break
            if time_to_minutes(time) is None:
                errors['times'] = f'Invalid time for {day}: {time}'
                break
        if self.end_time and time_to_minutes(self.end_time) is None:
            errors['endTime'] = f'Invalid end time: {self.end_time}'
        end = time_to_minutes(self.end_time)
        if end is not None:
            for day, time in self._day_times.items():
                start = time_to_minutes(time)
                if start is not None and start >= end:
                    errors['endTime'] = f'End time must be after the {day} start time'
                    break
        return errors

    # --- persistence ----------------------------------------------------
    @staticmethod
    def from_dict(data):
        '''Build a Subject from its JSON shape. Unknown keys are ignored.'''
        d = dict(data) if isinstance(data, dict) else {}
        times = d.get('times') or {}
        start = d.get('startTime') or ''
        frequency = d.get('frequency') or {}
        selected = frequency.get('selectedDays')
        if not selected:
            # older records and bare bodies only carry the times map
            selected = [day for day in WEEKDAYS if times.get(day)]
        day_times = {}
        for day in selected:
            key = str(day).strip().lower()
            if key in WEEKDAYS and key not in day_times:
                day_times[key] = times.get(key) or start
        return Subject(
            name=d.get('name', ''),
            day_times=day_times,
            end_time=d.get('endTime') or '',
            resources=d.get('resources'),
            id=d.get('id') or None,
        )

    def to_dict(self):
        '''Converts the Subject to its JSON wire shape.'''
        return {
            "id": self.id,
            "name": self.name,
            "times": self.times,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "resources": dict(self.resources),
            "frequency": {
                "daysPerWeek": self.days_per_week,
                "selectedDays": self.selected_days,
            },
        }
