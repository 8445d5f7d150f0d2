"""CSV bulk import (spreadsheet paste) into Subject records.

Expected layout (header names are case-insensitive and order-independent):

    time,monday,tuesday,wednesday,thursday,friday
    8:30 - 8:50 AM,Bible & Pray,Bible & Pray,,Mathematics,
    1:00 - 1:10,Mathematics,,Science,,

Each non-empty weekday cell schedules that subject on that day at the row's
start time. Cells naming the same subject (case-insensitive) accumulate into
one Subject.
"""
from __future__ import annotations
import csv
import io
import logging
from typing import Dict, List, NamedTuple, Tuple

from lesson.domain.Subject import Subject
from lesson.logic.schedule.time_utils import parse_time_range
from lesson.utilities.constants import WEEKDAYS

logger = logging.getLogger(__name__)

__all__ = ["CsvImportError", "CsvPreview", "preview_csv", "import_csv"]


class CsvImportError(ValueError):
    """The CSV text as a whole could not be processed."""


class CsvPreview(NamedTuple):
    subjects: List[Subject]
    warnings: List[str]


def _read_rows(text: str) -> List[Tuple[int, Dict[str, str]]]:
    """Return (physical line where the record starts, row by lower-cased header)."""
    if not text or not text.strip():
        raise CsvImportError("No CSV data provided")
    reader = csv.reader(io.StringIO(text.rstrip()))
    try:
        header_row = next((values for values in reader if any(v.strip() for v in values)), None)
        if not header_row:
            raise CsvImportError("Missing header row")
        headers = [h.strip().lower() for h in header_row]
        if 'time' not in headers:
            raise CsvImportError("Header row must contain a 'time' column")
        if not any(day in headers for day in WEEKDAYS):
            raise CsvImportError("Header row must contain at least one weekday column")
        rows = []
        line_no = reader.line_num + 1
        for values in reader:
            row = {}
            for index, header in enumerate(headers):
                row.setdefault(header, values[index].strip() if index < len(values) else '')
            rows.append((line_no, row))
            line_no = reader.line_num + 1
    except csv.Error as e:
        raise CsvImportError(f"Malformed CSV: {e}") from e
    return rows


def preview_csv(text: str) -> CsvPreview:
    """Parse the whole document into accumulated subjects plus warnings.

    Rows without a time or without any weekday cell are dropped. A time that
    does not parse still schedules its cells (with an empty start time) and
    adds a warning, so bad source data is visible in the preview.
    Raises CsvImportError on structural problems; nothing partial is returned.
    """
    rows = _read_rows(text)
    subject_map: Dict[str, Subject] = {}
    warnings: List[str] = []
    for line_no, row in rows:
        time_cell = row.get('time', '')
        if not time_cell or not any(row.get(day) for day in WEEKDAYS):
            continue
        start = parse_time_range(time_cell)["start"]
        if not start:
            message = f"Line {line_no}: could not parse time {time_cell!r}"
            logger.warning(message)
            warnings.append(message)
        for day in WEEKDAYS:
            subject_name = (row.get(day) or '').strip()
            if not subject_name:
                continue
            key = subject_name.lower()
            subject = subject_map.get(key)
            if subject is None:
                subject = Subject(name=subject_name)
                subject_map[key] = subject
            subject.set_day_time(day, start)
    subjects = list(subject_map.values())
    logger.info("CSV preview: %d row(s) -> %d subject(s), %d warning(s)", len(rows), len(subjects), len(warnings))
    return CsvPreview(subjects, warnings)


def import_csv(text: str) -> List[Subject]:
    return preview_csv(text).subjects
