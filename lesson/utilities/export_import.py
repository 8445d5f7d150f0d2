"""
Export and import of the weekly schedule (CSV sheet, JSON, PDF).

The CSV produced here uses the same layout the bulk importer reads, so a
schedule can be exported to a spreadsheet, edited and pasted back.
"""
import asyncio
import csv
import io
import json
import logging
from pathlib import Path
from typing import Iterable, List

from lesson.domain.Subject import Subject
from lesson.infra.gateway import SubjectGateway
from lesson.infra.pdf_utils import generate_pdf_for_week
from lesson.logic.importing.csv_importer import CsvImportError, preview_csv
from lesson.logic.schedule.projector import project_week
from lesson.utilities.constants import CSV_HEADERS, WEEKDAYS

logger = logging.getLogger(__name__)


def schedule_to_csv(subjects: Iterable[Subject]) -> str:
    """One row per distinct time range; subjects sharing a slot on the same day stack into extra rows."""
    week = project_week(subjects)
    slots = {}
    for day in WEEKDAYS:
        for occ in week[day]:
            slots.setdefault((occ.start_time, occ.end_time), {}).setdefault(day, []).append(occ.name)

    out = io.StringIO()
    writer = csv.writer(out, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for (start, end), by_day in sorted(slots.items()):
        depth = max(len(names) for names in by_day.values())
        for i in range(depth):
            row = [f"{start} - {end}"]
            for day in WEEKDAYS:
                names = by_day.get(day, [])
                row.append(names[i] if i < len(names) else '')
            writer.writerow(row)
    return out.getvalue()


def subjects_to_json(subjects: Iterable[Subject]) -> str:
    return json.dumps([s.to_dict() for s in subjects], indent=2, ensure_ascii=False)


class DataExporter:
    """Export the schedule loaded through the persistence gateway."""

    def __init__(self, gateway: SubjectGateway):
        self.gateway = gateway

    async def export(self, output_path: Path, fmt: str = "csv") -> Path:
        await self.gateway.connect()
        subjects = await self.gateway.load()
        output_path = Path(output_path)
        if fmt == "pdf":
            output_path.write_bytes(generate_pdf_for_week(subjects))
        elif fmt == "json":
            output_path.write_text(subjects_to_json(subjects), encoding='utf-8')
        else:
            output_path.write_text(schedule_to_csv(subjects), encoding='utf-8')
        logger.info(f"Exported {len(subjects)} subjects to {output_path} ({fmt})")
        return output_path


class DataImporter:
    """Import a spreadsheet CSV file through the persistence gateway."""

    def __init__(self, gateway: SubjectGateway):
        self.gateway = gateway

    async def import_csv_file(self, input_path: Path) -> List[Subject]:
        """Return the imported subjects; raises CsvImportError or OSError when nothing was stored."""
        text = Path(input_path).read_text(encoding='utf-8')
        preview = preview_csv(text)
        for warning in preview.warnings:
            logger.warning(warning)
        await self.gateway.connect()
        if not await self.gateway.save_many(preview.subjects):
            raise OSError(f"Could not store subjects from {input_path}")
        logger.info(f"Imported {len(preview.subjects)} subjects from {input_path}")
        return preview.subjects


# CLI interface
if __name__ == "__main__":
    import argparse
    from lesson.utilities.config import LOG_LEVEL

    logging.basicConfig(level=LOG_LEVEL)

    parser = argparse.ArgumentParser(description='Export/Import the lesson schedule')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--format', choices=['csv', 'json', 'pdf'], default='csv', help='Export format')
    parser.add_argument('--file', required=True, help='Input/output file path')

    args = parser.parse_args()
    gateway = SubjectGateway()

    if args.action == 'export':
        result = asyncio.run(DataExporter(gateway).export(Path(args.file), args.format))
        print(f"✓ Exported to: {result}")
    else:
        try:
            imported = asyncio.run(DataImporter(gateway).import_csv_file(Path(args.file)))
        except (CsvImportError, OSError) as e:
            print(f"✗ Import failed: {e}")
            raise SystemExit(1)
        print(f"✓ Imported {len(imported)} subjects")
