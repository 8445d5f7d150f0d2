"""Weekly grid layout: pixel placement of projected occurrences."""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

from lesson.domain.Subject import Subject
from lesson.logic.schedule.projector import project_week
from lesson.logic.schedule.time_utils import format_time, slot_height, time_to_offset
from lesson.utilities.config import GRID_END_HOUR, GRID_START_HOUR, MIN_SLOT_HEIGHT, PIXELS_PER_HOUR

logger = logging.getLogger(__name__)

__all__ = ["hour_labels", "layout_week"]


def hour_labels(start_hour: int, end_hour: int, pixels_per_hour: float) -> List[Dict[str, Any]]:
    return [
        {"label": format_time(f"{h:02d}:00"), "top": (h - start_hour) * pixels_per_hour}
        for h in range(start_hour, end_hour + 1)
    ]


def layout_week(subjects: Iterable[Subject], *, start_hour: int = GRID_START_HOUR, end_hour: int = GRID_END_HOUR,
                pixels_per_hour: float = PIXELS_PER_HOUR, min_height: float = MIN_SLOT_HEIGHT) -> Dict[str, Any]:
    """Place every occurrence of the week on a vertical time grid.

    Returns:
        {
          'days': { 'monday': [ {occurrence fields..., 'top': float|None, 'height': float}, ... ], ... },
          'hours': [ {'label': '8:00 AM', 'top': 0.0}, ... ],
          'height': total grid height in pixels
        }
    Occurrences whose start time cannot be parsed keep ``top=None``; the
    template skips them instead of failing the whole page.
    """
    week = project_week(subjects)
    days: Dict[str, List[Dict[str, Any]]] = {}
    for day, occurrences in week.items():
        placed = []
        for occ in occurrences:
            entry = occ.to_dict()
            top: Optional[float]
            try:
                top = time_to_offset(occ.start_time, start_hour, pixels_per_hour)
            except ValueError:
                logger.warning("Cannot place %s on %s: bad start time %r", occ.name, day, occ.start_time)
                top = None
            entry["top"] = top
            entry["height"] = slot_height(occ.start_time, occ.end_time, min_height, pixels_per_hour)
            placed.append(entry)
        days[day] = placed
    return {
        "days": days,
        "hours": hour_labels(start_hour, end_hour, pixels_per_hour),
        "height": (end_hour - start_hour) * pixels_per_hour,
    }
